from typing import Dict, List

from addthread import CompletionSignal


def output_lines(out: str) -> List[str]:
    return [line for line in out.splitlines() if line]


def thread_ids(lines: List[str]) -> Dict[str, int]:
    """
    Collects the thread identifiers reported in lines such as ``ID of thread in Main(): 1234``, keyed by the name of
    the reporting routine (``Main`` or ``Add``).
    """
    ids = dict()
    for line in lines:
        if line.startswith("ID of thread in "):
            prefix, ident = line.rsplit(": ", 1)
            ids[prefix[len("ID of thread in "):-2]] = int(ident)
    return ids


class CountingSignal(CompletionSignal):
    """completion signal that records how often set was called and how often a wait returned successfully"""

    def __init__(self, signaled=False) -> None:
        super().__init__(signaled)
        self.sets = 0
        self.waits = 0

    def set(self):
        self.sets += 1
        super().set()

    def wait(self, timeout=None) -> bool:
        result = super().wait(timeout)
        if result:
            self.waits += 1
        return result
