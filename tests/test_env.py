import numpy as np
import pytest

from connectfour.errors import GameOverError
from connectfour.game.rules import ConnectFourEnv
from connectfour.utils import WIDTH, HEIGHT, Player


@pytest.fixture
def env():
    env = ConnectFourEnv(render_mode="ascii")
    env.reset(seed=0)
    return env


def test_reset_returns_empty_observation(env):
    observation, info = env.reset(seed=1)
    assert observation.shape == (HEIGHT, WIDTH)
    assert env.observation_space.contains(observation)
    assert not observation.any()
    assert info['valid_moves'] == list(range(WIDTH))
    assert info['current_player'] == Player.ONE.value
    assert info['game_result'] == 'IN_PROGRESS'


def test_step_places_piece_on_bottom_row(env):
    observation, reward, terminated, truncated, info = env.step(3)
    assert observation[0, 3] == Player.ONE.value
    assert reward == env.reward_step
    assert not terminated and not truncated
    assert info['current_player'] == Player.TWO.value
    assert info['last_move'] == (0, 3)


def test_step_accepts_numpy_actions(env):
    observation, *_ = env.step(np.int64(2))
    assert observation[0, 2] == Player.ONE.value


def test_full_column_is_penalised(env):
    for _ in range(HEIGHT):
        env.step(0)
    before = env.engine.board.get_state()

    observation, reward, terminated, truncated, info = env.step(0)
    assert reward == env.reward_invalid_move
    assert truncated and not terminated
    assert info['invalid_move']
    assert np.array_equal(observation, before)


def test_out_of_range_action_is_penalised(env):
    observation, reward, terminated, truncated, info = env.step(WIDTH + 2)
    assert reward == env.reward_invalid_move
    assert truncated
    assert not observation.any()


def test_player_one_win_rewards(env):
    for column in [0, 1, 0, 1, 0, 1]:
        env.step(column)
    _, reward, terminated, truncated, info = env.step(0)
    assert reward == env.reward_win
    assert terminated and not truncated
    assert info['game_result'] == 'PLAYER_ONE_WIN'
    assert len(info['winning_line']) == 4
    assert info['valid_moves'] == []


def test_player_two_win_rewards(env):
    for column in [0, 6, 1, 6, 2, 6, 4]:
        env.step(column)
    _, reward, terminated, _, info = env.step(6)
    assert reward == env.reward_lose
    assert terminated
    assert info['game_result'] == 'PLAYER_TWO_WIN'


def test_tie_rewards(env, tie_moves):
    for column in tie_moves[:-1]:
        env.step(column)
    _, reward, terminated, _, info = env.step(tie_moves[-1])
    assert reward == env.reward_draw
    assert terminated
    assert info['game_result'] == 'DRAW'


def test_step_after_termination_raises(env):
    for column in [0, 1, 0, 1, 0, 1, 0]:
        env.step(column)
    with pytest.raises(GameOverError):
        env.step(2)


def test_render_modes(env, capsys):
    env.step(4)
    assert "X" in env.render()

    human = ConnectFourEnv(render_mode="human")
    human.reset()
    assert human.render() is None
    assert "|0 1 2 3 4 5 6|" in capsys.readouterr().out

    assert ConnectFourEnv().render() is None


def test_unknown_render_mode():
    with pytest.raises(ValueError):
        ConnectFourEnv(render_mode="rgb_array")


def test_close_leaves_env_usable(env):
    env.step(1)
    assert env.close() is None
    observation, _ = env.reset()
    assert not observation.any()
