"""
notifier.py: Fire-and-forget game-over notification.

The game core only emits the final score. The dispatcher runs the actual
notification on a worker thread and hands results back through a queue, so
the simulation never waits for it and never sees its failures.
"""

import json
import logging
import queue
import socket
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .constants import BUFFER_SIZE, NOTIFY_TIMEOUT
from .errors import CollaboratorFailure

logger = logging.getLogger(__name__)

Notify = Callable[[int], str]


@dataclass(frozen=True)
class NotificationResult:
    """Outcome of one notification: a transaction id or an error."""
    score: int
    tx_id: Optional[str] = None
    error: Optional[CollaboratorFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class NotificationDispatcher:
    """Runs a notify(score) -> tx_id callable off the game loop thread."""

    def __init__(self, notify: Notify):
        self._notify = notify
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="score-notify")
        self._results: "queue.Queue[NotificationResult]" = queue.Queue()

    def _run(self, score: int) -> NotificationResult:
        try:
            tx_id = self._notify(score)
        except CollaboratorFailure as e:
            result = NotificationResult(score=score, error=e)
        except Exception as e:
            result = NotificationResult(score=score, error=CollaboratorFailure(str(e)))
        else:
            result = NotificationResult(score=score, tx_id=str(tx_id))

        if result.ok:
            logger.info("Notification for score %d sent: %s", score, result.tx_id)
        else:
            logger.warning("Notification for score %d failed: %s", score, result.error)
        self._results.put(result)
        return result

    def dispatch(self, score: int) -> Future:
        """Schedules the notification and returns immediately."""
        try:
            return self._executor.submit(self._run, score)
        except RuntimeError as e:
            # Executor already shut down
            result = NotificationResult(score=score, error=CollaboratorFailure(str(e)))
            logger.warning("Notification for score %d not sent: %s", score, e)
            self._results.put(result)
            future: Future = Future()
            future.set_result(result)
            return future

    def poll(self) -> List[NotificationResult]:
        """Drains every result that completed since the last poll."""
        results = []
        while True:
            try:
                results.append(self._results.get_nowait())
            except queue.Empty:
                return results

    def shutdown(self, wait: bool = False):
        self._executor.shutdown(wait=wait)


class UdpScoreNotifier:
    """
    Reports a final score to a receipt service over UDP/JSON.
    Callable as notify(score) -> tx_id; raises CollaboratorFailure otherwise.
    """

    def __init__(self, address: Tuple[str, int], timeout: float = NOTIFY_TIMEOUT):
        self.address = address
        self.timeout = timeout

    def __call__(self, score: int) -> str:
        request = json.dumps({"type": "game_over", "score": score}).encode('utf-8')

        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.settimeout(self.timeout)
            try:
                sock.sendto(request, self.address)
                data, _ = sock.recvfrom(BUFFER_SIZE)
            except socket.timeout as e:
                raise CollaboratorFailure(f"No receipt from {self.address} within {self.timeout}s") from e
            except OSError as e:
                raise CollaboratorFailure(f"Could not reach {self.address}: {e}") from e

        try:
            message = json.loads(data.decode('utf-8'))
        except ValueError as e:
            raise CollaboratorFailure("Malformed receipt") from e

        if not isinstance(message, dict):
            raise CollaboratorFailure("Malformed receipt")
        if message.get("type") == "receipt" and message.get("tx_id"):
            return str(message["tx_id"])
        raise CollaboratorFailure(message.get("message", "Notification rejected"))
