"""
Background Workers (Threading)
==============================
This module contains QThread subclasses for running a simulation off the GUI thread.

Why is this file needed?
------------------------
1. Responsiveness: An animated run sleeps between drops. Doing that on the
   main thread would freeze the playground window.
2. Signals: Every drop is handed to the view through Qt Signals, which is the
   safe way to update widgets from another thread.

Classes:
    SimulationWorker: Throws toothpicks one by one and reports each drop.
"""
import logging
from typing import Optional

from PySide6.QtCore import QThread, Signal

from buffonpi.controller.pacing import paced, ms_to_seconds
from buffonpi.model.field import Field
from buffonpi.model.state import Snapshot
from buffonpi.solvers.simulator import Simulator, validate_drop_count

logger = logging.getLogger(__name__)


class SimulationWorker(QThread):
    # Signals to update the UI from the background
    dropped = Signal(object)  # Snapshot of the latest drop
    progress_updated = Signal(int, str)  # e.g., (10, "Thrown 200/2000 toothpicks")
    finished = Signal()
    error_occurred = Signal(str)

    def __init__(
        self,
        field: Field,
        total_drops: int,
        throw_interval_ms: float = 1.0,
        seed: Optional[int] = None,
    ):
        super().__init__()
        self.field = field
        self.total_drops = validate_drop_count(total_drops)
        self.throw_interval_ms = throw_interval_ms
        self.simulator = Simulator(field, seed=seed)
        self.last_snapshot: Optional[Snapshot] = None
        self.is_running = True

    def _sleep(self, seconds: float) -> None:
        QThread.msleep(int(round(seconds * 1000)))

    def run(self):
        try:
            logger.info("Starting simulation in background thread...")
            self.progress_updated.emit(0, "Throwing toothpicks...")

            delay = ms_to_seconds(self.throw_interval_ms)
            for snapshot in paced(self.simulator.run(self.total_drops), delay, sleep=self._sleep):
                self.last_snapshot = snapshot
                self.dropped.emit(snapshot)

                percentage = int(100 * snapshot.throw_count / self.total_drops)
                self.progress_updated.emit(
                    percentage, f"Thrown {snapshot.throw_count}/{self.total_drops} toothpicks"
                )

                if not self.is_running:
                    logger.info(f"Simulation stopped after {snapshot.throw_count} drops.")
                    break

            logger.info("END")
            self.finished.emit()

        except Exception as e:
            logger.error(f"Error in SimulationWorker: {e}")
            self.error_occurred.emit(str(e))

    def stop(self) -> None:
        self.is_running = False
