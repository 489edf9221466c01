# tablecat

A small desktop companion built on pygame. A borderless window shows an
animated character. You can drag it with the mouse and use a right-click menu
to choose what it does. The same menu leads to a simple side-scrolling runner
game, in which you jump over obstacles.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Running

```
tablecat [RESOURCE_DIR]
```

`RESOURCE_DIR` is the directory that holds the images. It defaults to
`resources` in the current directory. The pet starts with the `sayhello`
animation.

The images are looked up under the resource directory as follows:

- pet frames: `<name>/image/<name>.png/<name>(<n>).png`, where `<name>` is the
  action name (`cold`, `fly`, `happy`, `jump`, `liedown`, `oioioi`,
  `sayhello`) and `<n>` counts from 0
- game images: `images/player.png` and `images/obstacle.png`

If an image cannot be loaded, an empty image is used in its place, so the
program still runs without any resources.

## The pet

- **Drag** the pet with the left mouse button to move its window. This works
  when pygame can reach the SDL window, which it needs in order to position
  the window.
- **Right-click** the pet to open the menu. It has these entries, in this
  order:
  - `跑酷游戏`, which closes the pet and opens the game's start menu
  - `cold`, `fly`, `happy`, `jump`, `liedown`, `oioioi`, `sayhello`, which
    switch to that animation
  - `Hide`, which closes the pet

Each animation loops through its frames, one frame every 70 ms. Every action
except `jump` is drawn at the bottom of the window. `jump` is drawn at
offset (100, 100) from the top-left corner.

## The runner game

The start menu has buttons `开始` (start), `查看规则` (rules, with `返回` to go
back) and `退出` (quit). Once a game is running:

- Press **Space** to jump. The player starts with an upward speed of 15 and
  gravity adds 0.5 each frame until it lands on the ground at y = 500. It
  cannot jump again until it has landed.
- Obstacles enter at the right edge, x = 800, and move 5 pixels left each
  frame. They are removed once their right edge has passed the left side of
  the screen.
- The game runs at about 60 frames per second. A new obstacle appears on the
  first frame and then every 100 frames.

Closing the game window ends the program.

## What the game does not do

Obstacles and the player do not interact. There is no collision detection,
no score and no game-over state. The game runs until its window is closed.
The rules page is empty. The pet's window is borderless but not
transparent. Once the pet is hidden or the game has ended, the program exits.

## Using the pieces from Python

The game logic and the animation bookkeeping do not need a window:

```python
from tablecat.player import Player
from tablecat.obstacle import Obstacle
from tablecat.game import Game
from tablecat.menu import MainMenu, Page
from tablecat.actions import RoleAct, Animation, frame_paths, alignment, draw_position

player = Player(x=100.0, y=500.0)
player.jump()          # True: the jump started
player.move()          # one frame of the jump under gravity

obstacle = Obstacle()  # starts at (800, 500)
obstacle.move()        # moves 5 pixels left; returns whether it is off screen

game = Game()
game.update()          # moves the player and obstacles, spawns on schedule

menu = MainMenu()
menu.show_rules()      # menu.page is Page.RULES
menu.start()           # returns a new Game and hides the menu

anim = Animation()     # starts with RoleAct.SAYHELLO
anim.show(RoleAct.HAPPY)
anim.tick()            # the path of the next frame
```

- `frame_paths(act)` lists an action's frame paths in order.
- `alignment(act)` returns `Alignment.BOTTOM` or `Alignment.TOP_LEFT`.
- `draw_position(act, frame_height, window_height)` gives the top-left corner
  at which a frame is drawn.
- `tablecat.pet` has `menu_entries()`, which lists the right-click menu, and
  `DragTracker`, which works out window positions while dragging.
- `tablecat.game.run_game(resource_dir)` opens the game window directly.

## Tests

```
pip install ".[test]"
pytest
```