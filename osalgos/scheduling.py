"""CPU scheduling simulations: FCFS, non-preemptive priority, round robin, SRTF."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, TextIO


@dataclass(frozen=True)
class Process:
    """A process submitted to the scheduler."""

    pid: int
    arrival_time: int
    burst_time: int
    priority: int = 0


@dataclass(frozen=True)
class ProcessResult:
    """The outcome of scheduling one process."""

    process: Process
    completion_time: int

    @property
    def turnaround_time(self) -> int:
        return self.completion_time - self.process.arrival_time

    @property
    def waiting_time(self) -> int:
        return self.turnaround_time - self.process.burst_time


@dataclass(frozen=True)
class Schedule:
    """Per-process results of one scheduling run, in report order."""

    results: tuple[ProcessResult, ...]
    show_priority: bool = False

    def average_waiting_time(self) -> float:
        return sum(r.waiting_time for r in self.results) / len(self.results)

    def average_turnaround_time(self) -> float:
        return sum(r.turnaround_time for r in self.results) / len(self.results)

    def format_table(self) -> str:
        """Render the results table followed by the averages."""
        columns = ["PID", "AT", "BT"]
        if self.show_priority:
            columns.append("PR")
        columns += ["CT", "TAT", "WT"]
        lines = ["", "\t".join(columns)]
        for result in self.results:
            proc = result.process
            cells = [f"P{proc.pid}", str(proc.arrival_time), str(proc.burst_time)]
            if self.show_priority:
                cells.append(str(proc.priority))
            cells += [
                str(result.completion_time),
                str(result.turnaround_time),
                str(result.waiting_time),
            ]
            lines.append("\t".join(cells))
        lines.append("")
        lines.append(f"Avg WT = {self.average_waiting_time():.2f}")
        lines.append(f"Avg TAT = {self.average_turnaround_time():.2f}")
        return "\n".join(lines) + "\n"


def _require(processes: Iterable[Process]) -> list[Process]:
    procs = list(processes)
    if not procs:
        raise ValueError("no processes to schedule")
    return procs


def _require_positive_bursts(procs: Sequence[Process]) -> None:
    for proc in procs:
        if proc.burst_time <= 0:
            raise ValueError(f"process P{proc.pid} has a non-positive burst time")


def _exchange_sort_by_arrival(procs: Sequence[Process]) -> list[Process]:
    # Deliberately an unstable exchange sort: the order it leaves equal
    # arrival times in decides which of them runs first.
    items = list(procs)
    for i in range(len(items) - 1):
        for j in range(i + 1, len(items)):
            if items[i].arrival_time > items[j].arrival_time:
                items[i], items[j] = items[j], items[i]
    return items


def fcfs(processes: Iterable[Process]) -> Schedule:
    """First come, first served; results are reported in the order run."""
    ordered = _exchange_sort_by_arrival(_require(processes))
    clock = 0
    results = []
    for proc in ordered:
        clock = max(clock, proc.arrival_time) + proc.burst_time
        results.append(ProcessResult(proc, clock))
    return Schedule(tuple(results))


def priority_non_preemptive(processes: Iterable[Process]) -> Schedule:
    """Run the arrived process with the lowest priority number to completion."""
    procs = _require(processes)
    pending = dict(enumerate(procs))
    completion: dict[int, int] = {}
    clock = 0
    while pending:
        ready = [(p.priority, i) for i, p in pending.items() if p.arrival_time <= clock]
        if not ready:
            clock = min(p.arrival_time for p in pending.values())
            continue
        _, index = min(ready)
        clock += pending.pop(index).burst_time
        completion[index] = clock
    results = tuple(ProcessResult(p, completion[i]) for i, p in enumerate(procs))
    return Schedule(results, show_priority=True)


def round_robin(processes: Iterable[Process], quantum: int) -> Schedule:
    """Cycle through arrived processes in input order, a quantum at a time."""
    procs = _require(processes)
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    _require_positive_bursts(procs)
    remaining = [p.burst_time for p in procs]
    completion: dict[int, int] = {}
    clock = 0
    while len(completion) < len(procs):
        ran = False
        for index, proc in enumerate(procs):
            if remaining[index] > 0 and proc.arrival_time <= clock:
                ran = True
                step = min(quantum, remaining[index])
                clock += step
                remaining[index] -= step
                if remaining[index] == 0:
                    completion[index] = clock
        if not ran:
            clock = min(
                p.arrival_time for p, left in zip(procs, remaining) if left > 0
            )
    results = tuple(ProcessResult(p, completion[i]) for i, p in enumerate(procs))
    return Schedule(results)


def sjf_preemptive(processes: Iterable[Process]) -> Schedule:
    """Shortest remaining time first, re-deciding after every time unit."""
    procs = _require(processes)
    _require_positive_bursts(procs)
    remaining = [p.burst_time for p in procs]
    completion: dict[int, int] = {}
    clock = 0
    while len(completion) < len(procs):
        ready = [
            (remaining[i], i)
            for i, p in enumerate(procs)
            if p.arrival_time <= clock and remaining[i] > 0
        ]
        if not ready:
            clock = min(
                p.arrival_time for p, left in zip(procs, remaining) if left > 0
            )
            continue
        _, index = min(ready)
        remaining[index] -= 1
        clock += 1
        if remaining[index] == 0:
            completion[index] = clock
    results = tuple(ProcessResult(p, completion[i]) for i, p in enumerate(procs))
    return Schedule(results)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str], prompt: str) -> int:
    print(prompt, end="", flush=True)
    try:
        token = next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None
    return int(token)


def main(argv: Sequence[str] | None = None) -> int:
    """Read processes from standard input and print the schedule."""
    parser = argparse.ArgumentParser(
        prog="osalgos-schedule", description="Simulate a CPU scheduling algorithm."
    )
    parser.add_argument("algorithm", choices=["fcfs", "priority", "rr", "sjf"])
    args = parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    try:
        count = _read_int(tokens, "Enter number of processes: ")
        processes = []
        for pid in range(1, count + 1):
            arrival = _read_int(tokens, f"P{pid} Arrival Time: ")
            burst = _read_int(tokens, f"P{pid} Burst Time: ")
            priority = 0
            if args.algorithm == "priority":
                priority = _read_int(tokens, f"P{pid} Priority (Lower = Higher): ")
            processes.append(Process(pid, arrival, burst, priority))

        if args.algorithm == "fcfs":
            schedule = fcfs(processes)
        elif args.algorithm == "priority":
            schedule = priority_non_preemptive(processes)
        elif args.algorithm == "rr":
            quantum = _read_int(tokens, "Enter Time Quantum: ")
            schedule = round_robin(processes, quantum)
        else:
            schedule = sjf_preemptive(processes)
    except (EOFError, ValueError) as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    print(schedule.format_table(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())