import pytest

QtCore = pytest.importorskip("PySide6.QtCore")

from buffonpi.controller.workers import SimulationWorker  # noqa: E402


@pytest.fixture(scope="module")
def qt_app():
    app = QtCore.QCoreApplication.instance() or QtCore.QCoreApplication([])
    yield app


def test_worker_emits_every_drop(qt_app, field):
    worker = SimulationWorker(field, total_drops=20, throw_interval_ms=0, seed=1)
    dropped, progress, finished = [], [], []
    worker.dropped.connect(dropped.append)
    worker.progress_updated.connect(lambda pct, msg: progress.append(pct))
    worker.finished.connect(lambda: finished.append(True))

    worker.run()

    assert [s.throw_count for s in dropped] == list(range(1, 21))
    assert progress[0] == 0
    assert progress[-1] == 100
    assert finished == [True]
    assert worker.last_snapshot == dropped[-1]


def test_worker_stop(qt_app, field):
    worker = SimulationWorker(field, total_drops=100, throw_interval_ms=0, seed=1)
    dropped = []

    def on_drop(snapshot):
        dropped.append(snapshot)
        worker.stop()

    worker.dropped.connect(on_drop)
    worker.run()
    assert len(dropped) == 1


def test_worker_same_values_as_simulator(qt_app, field):
    from buffonpi.solvers.simulator import Simulator

    worker = SimulationWorker(field, total_drops=30, throw_interval_ms=0, seed=4)
    dropped = []
    worker.dropped.connect(dropped.append)
    worker.run()
    assert dropped == list(Simulator(field, seed=4).run(30))
