import enum
import logging
import threading
from typing import Any, Callable, NamedTuple, Optional

from addthread.exceptions import SignalAlreadyConsumedError, SignalAlreadySetError

logger = logging.getLogger(__name__)

_UNSET = object()


class AddParams(NamedTuple):
    a: int
    b: int


class SignalState(enum.Enum):
    UNSIGNALED = 0
    SIGNALED = 1


class CompletionSignal:
    """
    A binary, auto-resetting signal used for a one-shot handoff from a worker thread to a single waiting thread.

    The worker calls ``set`` exactly once, the waiter calls ``wait``, which blocks until the signal is set and then
    atomically resets it. Anything the worker did before calling ``set`` is visible to the waiter once ``wait``
    returns. The signal cannot be re-armed: a second ``set``, or a ``wait`` after the firing was consumed, raises.
    """

    def __init__(self, signaled=False) -> None:
        super().__init__()
        self._cond = threading.Condition(threading.Lock())
        self._state = SignalState.SIGNALED if signaled else SignalState.UNSIGNALED
        self._fired = signaled
        self._consumed = False

    @property
    def state(self) -> SignalState:
        with self._cond:
            return self._state

    def is_set(self) -> bool:
        return self.state is SignalState.SIGNALED

    def set(self):
        with self._cond:
            if self._fired:
                raise SignalAlreadySetError('Completion signal can only be set once')

            logger.debug('setting completion signal from %s', threading.current_thread().name)
            self._fired = True
            self._state = SignalState.SIGNALED
            self._cond.notify()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Blocks until the signal is set and resets it. Without a timeout the wait is unbounded and never returns if
        nobody sets the signal.

        :param timeout: optional number of seconds to wait
        :return: True if the signal was consumed, False if the timeout elapsed first
        """
        with self._cond:
            if self._consumed:
                raise SignalAlreadyConsumedError('Completion signal was already consumed')

            if not self._cond.wait_for(lambda: self._state is SignalState.SIGNALED, timeout):
                return False

            self._state = SignalState.UNSIGNALED
            self._consumed = True
            return True


class DemoConfig:
    def __init__(self, a: int = 10, b: int = 10, timeout: Optional[float] = None, pause: bool = True) -> None:
        super().__init__()
        self.a = a
        self.b = b
        self.timeout = timeout
        self.pause = pause

    def __call__(self) -> AddParams:
        return AddParams(self.a, self.b)


def add(data: Any, signal: CompletionSignal) -> Optional[int]:
    """
    Worker routine. Sums the two fields of the payload, reports the result and sets the completion signal. Payloads
    that are not ``AddParams`` are ignored: nothing is printed and the signal is never set.
    """
    if not isinstance(data, AddParams):
        logger.debug('ignoring payload of type %s', type(data))
        return None

    result = data.a + data.b
    print(f"ID of thread in Add(): {threading.get_ident()}")
    print(f"{data.a} + {data.b} is {result}")

    signal.set()
    return result


def start_worker(payload: Any, signal: CompletionSignal, target: Callable = add) -> threading.Thread:
    worker = threading.Thread(target=target, args=(payload, signal), name='add-worker')
    logger.debug('starting worker %s with payload %s', worker.name, payload)
    worker.start()
    return worker


def run(config: DemoConfig = None, payload: Any = _UNSET) -> bool:
    """
    Runs the demo on the calling thread: starts one worker with the payload and waits for it to signal completion.

    :param config: the demo config, defaults to ``DemoConfig()``
    :param payload: an explicit payload for the worker, by default the one built by the config
    :return: True if the worker signaled completion, False if a configured timeout elapsed
    """
    config = config or DemoConfig()

    print("***** Adding with Thread objects *****")
    print(f"ID of thread in Main(): {threading.get_ident()}")

    if payload is _UNSET:
        payload = config()

    signal = CompletionSignal()
    start_worker(payload, signal)

    if not signal.wait(config.timeout):
        logger.warning('worker did not signal completion within %s seconds', config.timeout)
        return False

    print("Other thread is done!")
    return True
