from cadcore.entity import Entity
from cadcore.entity_container import EntityContainer, NotifyCollectionChangedAction


class TrackedEntity(Entity):
    def __init__(self):
        super().__init__()
        self.removed = 0

    def remove(self):
        self.removed += 1
        super().remove()


def record(container):
    events = []
    container.collection_changed.connect(lambda *args: events.append(args))
    return events


def test_add_appends_and_notifies():
    container = EntityContainer()
    events = record(container)
    first, second = Entity(), Entity()
    container.add(first)
    container.add(second)
    assert container.entity_count == 2
    assert len(container) == 2
    assert list(container) == [first, second]
    assert events == [
        (NotifyCollectionChangedAction.ADD, first, 0),
        (NotifyCollectionChangedAction.ADD, second, 1),
    ]


def test_add_without_update_is_silent():
    container = EntityContainer()
    events = record(container)
    entity = Entity()
    container.add(entity, update=False)
    assert events == []
    assert container.get(0) is entity


def test_get_and_index_of():
    container = EntityContainer()
    first, second = Entity(), Entity()
    container.add(first)
    container.add(second)
    assert container.get(1) is second
    assert container.get(2) is None
    assert container.get(-1) is None
    assert container.index_of(second) == 1
    assert container.index_of(Entity()) == -1


def test_remove_entity_removes_and_notifies():
    container = EntityContainer()
    first, second = TrackedEntity(), TrackedEntity()
    container.add(first)
    container.add(second)
    events = record(container)
    container.remove_entity(second)
    assert list(container) == [first]
    assert second.removed == 1
    assert first.removed == 0
    assert events == [(NotifyCollectionChangedAction.REMOVE, second, 1)]


def test_remove_entity_without_update():
    container = EntityContainer()
    entity = TrackedEntity()
    container.add(entity)
    events = record(container)
    container.remove_entity(entity, update=False)
    assert container.entity_count == 0
    assert entity.removed == 1
    assert events == []


def test_remove_absent_entity_does_nothing():
    container = EntityContainer()
    kept = TrackedEntity()
    container.add(kept)
    events = record(container)
    stranger = TrackedEntity()
    container.remove_entity(stranger)
    assert stranger.removed == 0
    assert list(container) == [kept]
    assert events == []


def test_remove_clears_and_removes_children():
    container = EntityContainer()
    children = [TrackedEntity() for _ in range(3)]
    for child in children:
        container.add(child)
    container.remove()
    assert container.entity_count == 0
    assert [child.removed for child in children] == [1, 1, 1]


def test_container_is_an_entity():
    container = EntityContainer()
    assert container.type_name == "EntityContainer"
    assert container.name == "Unknown"