import random

from src.snake.config import Config, MAP_SIZE, RED, TILE_SIZE
from src.snake.game import Food, new_game

from tests.conftest import ScriptedRng


def test_respawn_stays_in_bounds():
    food = Food.new(random.Random(1234))
    for _ in range(1000):
        food.respawn()
        x, y = food.position
        assert 0 <= x < MAP_SIZE and 0 <= y < MAP_SIZE


def test_respawn_may_land_on_old_position():
    food = Food(position=(7, 7), rng=ScriptedRng(7, 7))
    food.respawn()
    assert food.position == (7, 7)


def test_respawn_does_not_avoid_snake():
    game = new_game()
    game.food = Food(position=(0, 0), rng=ScriptedRng(3, 25))
    game.food.respawn()
    assert game.food.position in game.snake.body


def test_same_seed_same_food():
    a = new_game(Config(seed=42))
    b = new_game(Config(seed=42))
    assert a.food.position == b.food.position
    a.food.respawn()
    b.food.respawn()
    assert a.food.position == b.food.position


def test_draw(canvas):
    Food(position=(3, 9)).draw(canvas)
    assert canvas.calls == [("rect", 3 * TILE_SIZE, 9 * TILE_SIZE, TILE_SIZE, TILE_SIZE, RED)]
