# threadlab

A collection of short, runnable programs that show how threads cooperate
and where they go wrong: shared counters with and without locking,
semaphores that limit how many threads run at once, condition variables
that let one thread wake another, and a small worker pool fed by a
bounded task queue.

Each demonstration is a module you can import and a command you can run.
Nothing outside the standard library is needed. Messages printed by the
demonstrations are in Portuguese.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Commands

Each command runs one demonstration and prints what happens as the
threads run. All of them accept `--help`.

| Command               | What it shows                                                       |
|-----------------------|---------------------------------------------------------------------|
| `threadlab-cpu`       | How many CPU cores are online                                       |
| `threadlab-counters`  | Several threads adding to one counter, with different protections   |
| `threadlab-pool`      | A fixed set of workers taking sums from a bounded task queue        |
| `threadlab-booking`   | Ticket desks booking cinema seats without synchronisation           |
| `threadlab-semaphore` | Step-by-step acquire and release on a counting semaphore            |
| `threadlab-signals`   | One thread waiting on a condition until another signals it          |
| `threadlab-hello`     | Many threads greeting, optionally limited by a semaphore            |
| `threadlab-reminders` | One thread per medication, each printing dose reminders             |
| `threadlab-lounge`    | Visitors entering and leaving a VIP lounge of limited capacity      |

Options:

- `threadlab-counters --strategy {race,mutex,semaphore,atomic} --threads N --iterations N`
  (defaults: `mutex`, 4 threads, 200000 iterations). Prints the final
  count next to the expected one. The `race` strategy reads and writes the
  counter with no protection, so its total is not guaranteed.
- `threadlab-pool --tasks N --threads N --capacity N --seed N`
  (defaults: 500 tasks, 4 workers, a queue of 256). Each task is a pair of
  random numbers below 100; each worker prints the sums it computes.
- `threadlab-booking [REQUEST ...] --seats N --delay SECONDS`
  (defaults: requests `60 60`, 100 seats, 1 second). One thread per
  request checks the free seats, waits, then subtracts, so both requests
  can be confirmed and the seat count can end below zero.
- `threadlab-signals [condition|timer] --delay SECONDS` (default
  `condition`, 5 seconds).
- `threadlab-hello --count N --work SECONDS --limit N --random --seed N`
  (defaults: 40 threads, 2 seconds each, no limit). `--random` makes each
  thread work a random 2 to 6 seconds.
- `threadlab-reminders --mode {remind,consume}` (default `remind`).
  `remind` prints timestamped dose reminders; `consume` prints how many
  pills remain after each dose.
- `threadlab-lounge --people N --capacity N --seed N` (defaults: 100
  people, capacity 20). Each person stays a random 2 to 12 seconds.

Several demonstrations sleep between steps on purpose, so that the
interleaving of threads is easy to follow; some take minutes or, in the
case of the reminders, hours to finish.

## Using the modules

The same demonstrations are available as functions, which take their
timings and output stream as arguments so that they can be run quickly
or captured:

- `threadlab.cpu` — `online_cpus()` returns the number of online
  processors or `None`; `describe(count)` gives the message printed for it.
- `threadlab.counters` — `Strategy`, `AtomicCounter` (with `increment()`
  and `value`) and `count_visitors(strategy, threads, iterations)`, which
  returns the final count.
- `threadlab.pool` — `Task` (with `execute()`), `TaskQueue` (a bounded
  FIFO with blocking `submit()` and `get()`) and `WorkerPool`, a context
  manager with `start()`, `submit()`, `close()` and a `results` list of
  `(worker_id, task, sum)` tuples.
- `threadlab.booking` — `Cinema` (with `reserve(quantity)` and
  `available`) and `run_booking(requests, seats, delay, output)`, which
  returns the seats left.
- `threadlab.semaphore_steps` — `CountingSemaphore` (with `acquire()`,
  `release()` and a readable `value`) and `run_steps(output)`.
- `threadlab.signals` — `wait_and_signal(delay, output)`, returning the
  identifiers of the two threads, and `timer_alarm(delay, output)`,
  returning the seconds until the alarm rang.
- `threadlab.hello` — `greet_pair(first, second, main_count, delay, output)`
  and `run_hello_threads(count, work, limit, output)`, which returns the
  largest number of threads seen running at once.
- `threadlab.reminders` — `Medication`, `remind`, `consume` and
  `run_reminders`; the sleep function and clock can be passed in.
- `threadlab.lounge` — `Lounge` (with `visit()`, `occupancy` and `peak`)
  and `run_event(people, capacity, durations, sleep, output)`, which
  returns the lounge after everyone has left.

For example:

```python
from threadlab.cpu import online_cpus, describe
from threadlab.counters import count_visitors

print(describe(online_cpus()))
print(count_visitors("atomic", threads=4, iterations=1000))  # 4000
```