from termsnake.runner import GameRunner, game_over_text, score_text
from termsnake.screen import FOOD_GLYPH, SNAKE_GLYPH, Key, KeyEvent, ResizeEvent


def make_runner(screen, state):
    sleeps = []
    runner = GameRunner(screen, state, sleep=sleeps.append)
    runner.sleeps = sleeps
    return runner


def test_frame_draws_snake_food_and_score(screen, state):
    runner = make_runner(screen, state)
    runner.new_round()
    state.food = (3, 15)
    assert runner.run_frame()

    frame = screen.frames[-1]
    for cell in state.snake:
        assert frame[cell] == SNAKE_GLYPH
    assert frame[(3, 15)] == FOOD_GLYPH
    assert screen.text_at(1) == score_text(0)
    assert runner.sleeps == [0.04]
    assert screen.calls[-2:] == ["clear", "show"]


def test_new_round_uses_screen_size(make_screen, state):
    screen = make_screen(width=40, height=12)
    runner = make_runner(screen, state)
    runner.new_round()
    assert (state.width, state.height) == (40, 12)
    assert state.snake.head == (20, 6)


def test_run_ends_with_game_over_prompt(screen, state):
    runner = make_runner(screen, state)
    runner.new_round()
    state.food = (0, 19)
    state.snake.change_direction(0, -1)

    while runner.run_frame():
        pass
    runner.draw_game_over()

    assert state.game_over
    text = game_over_text(0)
    assert screen.text_at(10) == text
    assert text == "Game Over, Score: 0, Play Again? y/n"
    assert screen.calls[-1] == "show"


def test_arrow_keys_change_heading(screen, state):
    runner = make_runner(screen, state)
    runner.new_round()
    runner.handle_event(KeyEvent(Key.UP))
    assert state.snake.heading.get() == (0, -1)
    runner.handle_event(KeyEvent(Key.LEFT))
    assert state.snake.heading.get() == (-1, 0)
    runner.handle_event(KeyEvent(Key.DOWN))
    assert state.snake.heading.get() == (0, 1)
    runner.handle_event(KeyEvent(Key.RIGHT))
    assert state.snake.heading.get() == (1, 0)


def test_heading_change_applies_on_next_tick(screen, state):
    runner = make_runner(screen, state)
    runner.new_round()
    state.food = (0, 19)
    runner.handle_event(KeyEvent(Key.DOWN))
    runner.run_frame()
    assert state.snake.head == (10, 11)


def test_other_keys_are_ignored(screen, state):
    runner = make_runner(screen, state)
    runner.new_round()
    runner.handle_event(KeyEvent(Key.OTHER))
    runner.handle_event(KeyEvent(Key.RUNE, "q"))
    assert state.snake.heading.get() == (1, 0)
    assert runner.exit_code is None
    assert not screen.finished


def test_resize_event_syncs_screen(screen, state):
    runner = make_runner(screen, state)
    runner.handle_event(ResizeEvent(30, 10))
    assert screen.calls == ["sync"]


def test_ctrl_c_tears_down_and_stops_drawing(screen, state):
    runner = make_runner(screen, state)
    runner.new_round()
    screen.events.append(KeyEvent(Key.CTRL_C))

    assert runner.input_loop() == 0
    assert screen.finished
    frames = len(screen.frames)
    assert not runner.run_frame()
    runner.draw_game_over()
    assert len(screen.frames) == frames


def test_ctrl_c_during_frame_sleep_skips_show(screen, state):
    runner = GameRunner(
        screen, state, sleep=lambda _delay: runner.handle_event(KeyEvent(Key.CTRL_C))
    )
    runner.new_round()
    state.food = (0, 19)
    assert not runner.run_frame()
    assert screen.frames == []
    assert runner.exit_code == 0


def test_restart_on_y_after_game_over(screen, state):
    runner = GameRunner(screen, state, sleep=lambda _delay: runner.stop())
    runner.new_round()
    state.food = (0, 19)
    state.snake.change_direction(0, -1)
    state.score = 3
    runner.run_frame()
    assert state.game_over

    runner.handle_event(KeyEvent(Key.RUNE, "Y"))
    runner.join(timeout=5)
    assert not runner.running
    assert state.score == 0
    assert not state.game_over
    assert len(state.snake) == 3


def test_n_after_game_over_exits(screen, state):
    runner = make_runner(screen, state)
    runner.new_round()
    state.game_over = True
    screen.events.append(KeyEvent(Key.RUNE, "n"))
    assert runner.input_loop() == 0
    assert screen.finished


def test_y_is_ignored_while_playing(screen, state):
    runner = make_runner(screen, state)
    runner.new_round()
    runner.handle_event(KeyEvent(Key.RUNE, "y"))
    assert not runner.running
    assert runner.exit_code is None
