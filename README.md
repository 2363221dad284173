# evilpikmin

A small real-time strategy sandbox. Little guys wander the field looking for
scrap metal. When a guy finds some, guys touching it band together into a
hivemind and carry it. Two pieces of scrap that touch become a build site.
Feed the site enough scrap and it becomes a tower that throws rocks at the
base in the middle of the field. A hand sprite follows the mouse.

## Installing

```
pip install .
```

This pulls in `pygame`, which provides the window, the input and the drawing.

## Playing

```
evilpikmin
```

This opens an 800×600 window with the main game state loaded. It takes two
options:

- `--graphics-path DIR` is the directory the BMP sprite sheets are read from
  (default `../resources/graphics/`, relative to the working directory). The
  sheets are `guy_sheet.bmp`, `scrap.bmp`, `squish.bmp`, `hand_sheet.bmp`,
  `tower.bmp` and `rock.bmp`.
- `--frames N` stops after `N` frames.

When a sheet cannot be loaded, the error is logged and the game keeps running;
sprites without a texture are not drawn.

## Controls

- Move the mouse to move the hand.
- Click to give the hand a small collider at the click point for that one
  frame.
- Press any key to log a description of entity 2's components (at `INFO`
  level through the `logging` module).
- Close the window to quit.

## Using the engine from code

The game runs on a small entity-component-system that can be used on its own:

```python
from evilpikmin.ecs import ECS, make_signature
from evilpikmin.components import CompSig, Position, Transform
from evilpikmin.transform_system import TransformSystem
from evilpikmin.collision_grid import CollisionGrid

ecs = ECS()
ecs.register_component(Position, CompSig.POSITION)
ecs.register_component(Transform, CompSig.TRANSFORM)
movement = ecs.register_system(
    TransformSystem, make_signature(CompSig.TRANSFORM, CompSig.POSITION)
)

guy = ecs.add_entity()
ecs.add_component(guy, Position(10, 10, 0))
ecs.add_component(guy, Transform(5, 0, 0))

movement.update(1.0, CollisionGrid(), ecs)
print(ecs.component(guy, Position))
```

Other parts that can be used on their own:

- `evilpikmin.vec2.Vec2` is a 2D vector. Angles are in degrees, with 0°
  pointing up.
- `evilpikmin.collisions` holds circle and rect colliders; only circle pairs
  are ever tested for overlap.
- `evilpikmin.collision_grid.CollisionGrid` is a spatial grid with 100-pixel
  cells, used to look up colliding entities.
- `evilpikmin.component_array.ComponentArray` and
  `evilpikmin.component_manager.ComponentManager` store component data;
  `evilpikmin.system.System` and `SystemManager` track which entities each
  system handles.
- The system modules (`build_system`, `carry_system`, `damage_system`,
  `draw_system`, `follows_mouse_system`, `guy_brain_system`,
  `hivemind_system`, `scanning_system`, `shoot_system`, `transform_system`)
  each hold one piece of the game's behaviour.
- `evilpikmin.engine.Engine` runs the main loop; `Engine.run(max_frames)`
  can stop after a fixed number of frames and returns the frames run.

## What it does not do

- No sprite sheets are shipped with the package; they must be supplied in
  the graphics directory.
- The main state is the only game state: there is no menu or pause screen.
- Clicking does not squish anything yet; nothing reacts to the hand's
  collider.
- The base loses hit points when rocks hit it, but nothing happens when they
  run out: there is no winning or losing.
- There is no sound and no saving.

## Running the tests

Install the test extra, then run pytest:

```
pip install .[test]
pytest
```