# soupdl

The game logic of a small side-scrolling platformer about eggs, trumpets and
fireballs. It is plain Python and uses only the standard library. The package
holds the rules of the game world: movement, collision, entities, the player,
the camera and a map editor model. A front end of your own reads the state and
draws it.

## Modules

- `soupdl.geometry`: `Rect`, `check_rect` and `TileGrid`. A `TileGrid` holds
  a tile map as `tiles[row][column]` together with a mapping of tile ids to
  flag bits. `TileGrid.tile_at` returns the tile at a world position, and
  `TileGrid.outside` is returned for positions beyond the map.
  `TileGrid.rect_hits_id` and `TileGrid.rect_hit_flags` test only the four
  corners of a rectangle.
- `soupdl.body`: `Body`, a moving hitbox. `move_horizontal` and
  `move_vertical` snap the body against solid tiles. `TileFlag` defines the
  `SOLID`, `SPIKE` and `EVILSTOP` tile flags.
- `soupdl.camera`: `Camera`. It has methods for the draw shift
  (`update_shifts`), for stopping at the map edges (`update_limits`), for
  free movement (`move`), for the visible tile range (`tile_bounds`) and for
  visibility tests (`can_see_point`). Map sizes are given in tiles and screen
  sizes in pixels.
- `soupdl.entities`: `EntId`, `Entity`, the fixed-capacity `EntityArray` and
  the `Registry`, which holds one array per entity type. An array raises
  `EntityArrayFull` when it is full. `Entity.mark_deleted` defers removal
  until the array is cleaned. `Registry.destroy_temp` empties every type that
  does not persist between maps.
- `soupdl.world`: `World`. It ties together the grid, registry, camera,
  barrier requests, collector, player, timestep, screen size, random source
  and sound hook. Sounds are recorded by name in `World.played` and passed to
  `World.on_sound` if you set one.
- Entity kinds:
  - `soupdl.particles.Particle`
  - `soupdl.projectiles.Fireball` and `soupdl.projectiles.Evilball`
  - `soupdl.cloud.Cloud`, with `scatter_clouds` and `update_cloud_count`
  - `soupdl.ragdoll.Ragdoll`
  - `soupdl.turret.Turret`
  - `soupdl.eggs.Groundguy`, `soupdl.eggs.Slideguy` and `soupdl.eggs.Coolegg`
  - `soupdl.props.Item`, `soupdl.props.Door`, `soupdl.props.Savebird` and
    `soupdl.props.BarrierBlock`
- `soupdl.barrier`: `BarrierRequests`. When a groundguy or slideguy is
  destroyed, it queues a check of its barrier tag. `handle` destroys the
  barrier blocks of every queued tag that no remaining enemy carries.
- `soupdl.player`: `Player`. It is driven by a `Keys` snapshot on each frame
  (`update`), and also has `damage`, `interact` (savebirds) and `restart`.
- `soupdl.collector`: `Collector` and `ColMapData`. The collector remembers
  the entity map of each visited map, so that picked-up trumpets and coins
  stay gone.
- `soupdl.spawners`: `EntTileId`, `EntTileDef`, `tile_for_char` and `spawn`.
  These turn the characters of a map file into spawned entities.
- `soupdl.editor`: `MapEditor` (brush size, tile selection, placing and
  erasing), `EntTile`, `EditorTileType`, `EditorState` and `resize_map`.
- `soupdl.font`: `layout_text`. It yields the source and destination
  rectangles of each glyph of the sprite font.
- `soupdl.fileio`: `read_until`, a bounded read up to a delimiter.
- `soupdl.log`: `perr`, `pinf` and `ErrCode`. `perr` and `pinf` write
  messages to standard error.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from soupdl.geometry import Rect, check_rect

check_rect(Rect(0, 0, 10, 10), Rect(5, 5, 10, 10))   # True
check_rect(Rect(0, 0, 10, 10), Rect(10, 0, 10, 10))  # False: the edges only touch
```

This example builds a small world with a solid floor, then runs one frame of
the player and of a groundguy:

```python
from soupdl.body import TileFlag
from soupdl.entities import EntId
from soupdl.geometry import TileGrid
from soupdl.player import Keys, Player
from soupdl.spawners import spawn, tile_for_char
from soupdl.world import World

tiles = [[0] * 10 for _ in range(9)] + [[1] * 10]
world = World(grid=TileGrid(tiles, tile_flags={1: TileFlag.SOLID}), player=Player())

spawn(world, tile_for_char("g"), 128, 200)      # a groundguy
world.player.update(world, Keys(right=True))
world.update_entities(EntId.GROUNDGUY)
world.barriers.handle(world.registry, lambda block: block.destroy(world))
```

```python
from soupdl.font import layout_text

# One (source, destination) pair per glyph that is drawn. Spaces move the pen
# on, and newlines return it to the left margin.
glyphs = list(layout_text("hi\nyo", 0, 0))
```

## What this package does not do

- It draws nothing and plays nothing. It has no window, renderer, textures or
  audio. Sounds are only names passed to `World.play`.
- It does not read or write map files or save games. When the player walks
  into a door, `Player.entered_door` holds the door id for that frame, and
  loading the map the door leads to is up to the caller. In the same way,
  `Player.interact` restores health at a savebird but does not write a save.
- It has no game loop, no keyboard or mouse handling and no command to run.
  You build `Keys` snapshots and mouse button numbers from your own input and
  pass them in.