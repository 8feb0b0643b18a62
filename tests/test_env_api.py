"""
Tests for the gymnasium environment.
"""

import gymnasium as gym
import numpy as np
import pytest

import blockfall.env  # noqa: F401
from blockfall.env.falling_block_env import ENV_ACTIONS, FallingBlockEnv
from blockfall.game import Action, GameConfig, TetrominoType

from conftest import fill_row, place


@pytest.fixture
def env():
    e = FallingBlockEnv(GameConfig(random_seed=0), render_mode="rgb_array", gravity_every=2)
    yield e
    e.close()


class TestSpaces:

    def test_action_space_excludes_pause_and_reset(self, env):
        assert env.action_space.n == 5
        assert Action.PAUSE not in ENV_ACTIONS
        assert Action.RESET not in ENV_ACTIONS

    def test_reset_observation(self, env):
        obs, info = env.reset(seed=5)
        assert obs.shape == (20, 10)
        assert obs.dtype == np.int8
        assert env.observation_space.contains(obs)
        assert (obs < 0).sum() == 4
        assert info["score"] == 0


class TestStep:

    def test_gravity_every_other_step(self, env):
        env.reset(seed=1)
        env.step(ENV_ACTIONS.index(Action.NONE))
        assert env.game.position[1] == 0
        env.step(ENV_ACTIONS.index(Action.NONE))
        assert env.game.position[1] == 1

    def test_episode_terminates(self, env):
        env.reset(seed=2)
        terminated = False
        for _ in range(5000):
            _, _, terminated, truncated, _ = env.step(ENV_ACTIONS.index(Action.SOFT_DROP))
            if terminated or truncated:
                break
        assert terminated

    def test_lines_from_agent_drop_are_reported(self):
        env = FallingBlockEnv(GameConfig(random_seed=0), gravity_every=100)
        env.reset(seed=0)
        fill_row(env.game.grid, 18)
        fill_row(env.game.grid, 19)
        env.game.grid.grid[18:, 0:2] = 0
        place(env.game, TetrominoType.O, 0, 18)

        _, reward, _, _, info = env.step(ENV_ACTIONS.index(Action.SOFT_DROP))

        assert reward == 300.0
        assert info["lines_cleared"] == 2

    def test_invalid_action_raises(self, env):
        env.reset()
        with pytest.raises(ValueError):
            env.step(9)

    def test_truncation(self):
        env = FallingBlockEnv(max_episode_steps=3)
        env.reset(seed=0)
        results = [env.step(ENV_ACTIONS.index(Action.LEFT)) for _ in range(3)]
        assert [r[3] for r in results] == [False, False, True]


class TestRender:

    def test_rgb_array(self, env):
        env.reset(seed=0)
        img = env.render()
        assert img.shape == (240, 120, 3)
        assert img.dtype == np.uint8


def test_registered_env_makes():
    env = gym.make("FallingBlocks-10x20-v0")
    obs, _ = env.reset(seed=0)
    obs, reward, terminated, truncated, info = env.step(env.action_space.sample())
    assert isinstance(reward, float)
    env.close()
