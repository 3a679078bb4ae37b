from config import Settings
from telemetry.controller import SeriesController


def test_starts_empty():
    controller = SeriesController()

    assert controller.granularity == 0
    assert controller.records == []
    assert controller.collection.is_empty


def test_listener_sees_every_rebuild(make_records):
    seen = []
    controller = SeriesController(on_update=seen.append)

    controller.set_records(make_records(20))
    controller.set_granularity(10)

    assert [len(c) for c in seen] == [20, 2]
    assert seen[-1] is controller.collection
    assert controller.collection.labels == ["0s", "10s"]


def test_same_granularity_does_not_rebuild(make_records):
    seen = []
    controller = SeriesController(on_update=seen.append)
    controller.set_records(make_records(5))

    controller.set_granularity(0)

    assert len(seen) == 1


def test_granularity_is_clamped(make_records):
    controller = SeriesController()
    controller.set_records(make_records(100))

    controller.set_granularity(90)

    assert controller.granularity == 60
    assert controller.collection.labels == ["0s", "60s"]


def test_listeners_called_in_order(make_records):
    calls = []
    controller = SeriesController()
    controller.add_listener(lambda c: calls.append("first"))
    controller.add_listener(lambda c: calls.append("second"))

    controller.set_records(make_records(1))

    assert calls == ["first", "second"]


def test_load_and_clear(hwinfo_csv):
    controller = SeriesController(settings=Settings())
    controller.set_granularity(2)

    rows = controller.load(hwinfo_csv(rows=5))

    assert rows == 5
    assert len(controller.collection) == 3

    controller.clear()
    assert controller.collection.is_empty
    assert controller.granularity == 2
