# cadcore

The core data model of a small CAD application, in plain Python with no
third-party dependencies.

## Modules

- `cadcore.signals`: `Signal`, a small observer. `connect(slot)` registers a
  callable and returns it, so it works as a decorator. `disconnect(slot)`
  removes one registration and raises `ValueError` if the slot is not
  connected. `emit(*args)` calls every slot in the order it was connected.
- `cadcore.color`: `Color`, a frozen dataclass with float `red`, `green` and
  `blue` components, normally between 0 and 1. `Color.parse` reads `#rrggbb` or
  `#aarrggbb`. The alpha part is ignored, and any other text raises
  `ValueError`. The class also has `to_hex()`, `scaled(scale)` and
  `lerp(other, f)`, plus the constants `Color.BLACK` and `Color.WHITE`.
- `cadcore.visual_styles`: the enums `PresentationMode`, `LineStyle`,
  `FillMode` and `LineThickness`. It also has the `Colors` palette (`DEFAULT`,
  `SELECTION`, `HIGHLIGHT`, `MARKER`, `ACTION_RED` and others) and the
  dataclasses `LineStyleDescription` and `LineThicknessDescription`.
- `cadcore.writer`: `Writer` builds the compact text format:
  - `write_value_string` escapes `" ' \ { } : ,`.
  - `write_quoted_string` writes a value in double quotes.
  - `begin_map`, `begin_map_key`, `begin_map_value` and `end_map` build maps.
  - `begin_list`, `begin_list_value` and `end_list` build lists.
  - `write_null_reference` writes `?null`.
  - `write_instance_reference(instance, guid)` writes `?<guid>` for an
    instance already seen. For a first occurrence it returns `False`.
  - `is_valid()` is true when every block is closed and every map key has a
    value.
- `cadcore.serialization_context`: `SerializationContext` holds the state of
  one serialization run:
  - a `scope` (`SerializationScope`) and a `result` (`SerializationResult`);
  - error messages: `add_error`, `has_errors`, `get_errors`;
  - named parameters: `set_parameter`, `get_parameter`, `remove_parameter`;
  - one instance per type: `set_instance`, `get_instance(cls)`,
    `remove_instance(cls)`.
- `cadcore.entity`: `Entity` has a `guid` (random UUID), a `type_name`, a
  `name`, a `has_errors` flag and an owning `document`. It emits the signals
  `has_errors_changed`, `error_state_changed` and `undo_saved`. Changing the
  `guid` or the `document` re-registers the entity with its document.
  `IDocument` is the abstract interface a document implements.
- `cadcore.entity_container`: `EntityContainer` is an ordered list of entities
  with these members:
  - `add`, `remove_entity`, `get` (returns `None` when the index is out of
    range) and `index_of` (returns -1 when the entity is absent);
  - `entity_count`, `len()` and iteration;
  - the `collection_changed` signal, which carries a
    `NotifyCollectionChangedAction`, the entity and its index.
- `cadcore.document`: `Document`, an entity container that keeps weak
  references to registered entities by guid. `find_instance` returns the
  document itself for its own guid. `instance_changed` emits a `REPLACE`
  change for entities it holds.
- `cadcore.layer`: `Layer` has `name`, `is_visible`, `is_locked`, `color` and
  `transparency`. Each property emits its own change signal and calls
  `save_undo()` when its value actually changes.
- `cadcore.interactive_entity`: `InteractiveEntity` has a `name` (default
  `"Unnamed"`), `is_visible` and `layer_id`. Changes notify the owning
  document, and visibility or layer changes emit `visual_changed`.
- `cadcore.body`: `Body` has a `position` `(x, y, z)`, a `rotation`
  quaternion `(x, y, z, w)` and a stack of shapes. It provides
  `add_shape(shape, save_undo)`, `save_topology_undo()` (emits
  `topology_undo_saved`) and `Body.create(shape)`.
- `cadcore.shape`: `ShapeType` and the abstract base `Shape`. Subclasses
  implement `shape_type()`, and `body()` returns the body the shape belongs
  to.
- `cadcore.model`: `Model` has a shared `workspaces` list and
  `Model.file_extension()` (`"step"`). `save()` and `has_unsaved_changes()`
  both return `False`.
- `cadcore.command_line`: `parse_command_line(argv=None)` reads `--sandbox`,
  `--nowelcome`, `--runscript`, `--input`, `--help` and a positional path into
  a `CommandLine` dataclass:
  - A positional argument takes precedence over `--input`.
  - `--help` prints the help text and sets `help_requested`.
  - An unknown option is reported on stderr, and the defaults are returned.
- `cadcore.resources`: `icon_path(name)` returns `://icons/<name>.svg`.
  `is_resource_path_valid(path)` checks that a file exists.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from cadcore.color import Color
from cadcore.writer import Writer

c = Color.parse("#ff8000")
print(c.to_hex())              # "#ff8000"

w = Writer()
w.begin_map()
w.begin_map_key()
w.write_value_string("name")
w.begin_map_value()
w.write_quoted_string("box")
w.end_map()
print(w.to_string(), w.is_valid())  # {name:"box"} True
```

## What this package does not do

This is a data model only:

- It has no graphical interface, 3D viewer, viewport or workspace
  implementation. `Model.workspaces` is just a list.
- It has no geometry kernel, so `Shape` has no concrete primitives and
  produces no real topology.
- It does not store or load files. `Model.save()` writes nothing and returns
  `False`, and `Writer` only builds text in memory.
- It installs no command. `parse_command_line` only parses options and starts
  nothing.