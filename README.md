# pongrework

A two-player Pong game played top to bottom on a 360 × 480 window. Each
player steers a paddle along one edge. The ball bounces off the side walls
and the paddles, and a point goes to the player whose opponent lets the ball
through. Paddles and ball move with a small rigid-body model that has
friction and a velocity cap. Background music plays throughout, and the
sound of each hit is panned left or right by where it happens on the field.

## Installing

```
pip install .
```

Running the tests needs the `test` extra:

```
pip install ".[test]"
pytest
```

## Playing

```
pongrework
```

`pongrework --help` lists the controls. If the sound files cannot be loaded,
the command logs the error and exits with status 1.

| Key            | Action                                       |
|----------------|----------------------------------------------|
| Enter          | Start a round                                |
| A / D          | Move the top paddle left / right             |
| Left / Right   | Move the bottom paddle left / right          |
| F2             | Show or hide the music and SFX volume panel  |
| F4             | Show or hide the frame-rate counter          |

While the volume panel is shown, click or drag on either slider with the
left mouse button to set that volume from 0 to 100.

After each point the ball goes back to the centre with a random diagonal
direction, and the game waits for Enter again. Each player's score is shown
next to their edge of the field.

Sounds are read from `assets/sounds/background.mp3`, `assets/sounds/ball.mp3`
and `assets/sounds/win.mp3`, relative to the working directory.

## Using the pieces

The physics works without a window:

```python
from pongrework.shapes import Circle, Rect

paddle = Rect((150.0, 10.0), (60.0, 10.0), (255, 255, 255))
ball = Circle((170.0, 12.0), 10.0, (255, 255, 255))

if ball.detect_collision(paddle):
    ball.solve_circle_collision(paddle)
ball.update_physics()
```

- `pongrework.rigidbody` — `Rigidbody` (`apply_force`, `update_position`,
  `detect_collision`, `solve_circle_collision`) and
  `detect_circle_rect_collision(circle, rect)`.
- `pongrework.shapes` — `Rect` and `Circle`, each with `render(surface)` and
  `update_physics()`; `Circle.restart(rng)` serves the ball again.
- `pongrework.sound` — `Sound`, which takes an optional `loader` so that
  something other than the pygame mixer can supply the sounds, and
  `collision_direction(ball_position)`.
- `pongrework.ui` — `UI`, `SoundControllerUI` and `fps_value(dt)`.
- `pongrework.game` — `Game`, which ties the paddles, ball, sound and overlay
  together. It accepts `sound`, `rng` and `clock` arguments; `handle_event`,
  `update_physics` and `update_render` can be driven by hand, and `run()`
  opens the window and runs the loop at up to 60 frames per second.

## What it does not do

There is no computer opponent: both paddles need a player. Scores last only
while the window is open, and volume settings are not saved between runs.