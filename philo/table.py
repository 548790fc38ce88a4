"""The dining table: philosophers, forks and the monitor that watches them."""

from __future__ import annotations

import threading
import time
from typing import TextIO

from philo.clock import current_time, sleep_ms
from philo.rules import Rules

_MONITOR_POLL_SECONDS = 0.0001


class Philosopher:
    """One diner, sharing a fork with each neighbour."""

    def __init__(
        self,
        id: int,
        table: Table,
        left_fork: threading.Lock,
        right_fork: threading.Lock,
    ) -> None:
        self.id = id
        self.table = table
        self.left_fork = left_fork
        self.right_fork = right_fork
        self.last_meal = table.start_time
        self.meals_eaten = 0

    def _fork_order(self) -> tuple[threading.Lock, threading.Lock]:
        # Even and odd diners reach for their forks in opposite order,
        # which prevents a circular wait.
        if self.id % 2 == 0:
            return self.right_fork, self.left_fork
        return self.left_fork, self.right_fork

    def take_forks(self) -> None:
        """Pick up both forks, announcing each one."""
        for fork in self._fork_order():
            fork.acquire()
            self.table.print_action(self, "has taken a fork")

    def release_forks(self) -> None:
        """Put both forks down, in the reverse order they were taken."""
        for fork in reversed(self._fork_order()):
            fork.release()

    def eat(self) -> None:
        """Take the forks, eat for the configured time and count the meal."""
        table = self.table
        self.take_forks()
        try:
            table.print_action(self, "is eating")
            with table.meal_lock:
                self.last_meal = current_time()
            sleep_ms(table.rules.time_eat)
            with table.meal_lock:
                self.meals_eaten += 1
        finally:
            self.release_forks()

    def rest(self) -> None:
        """Sleep for the configured time, then start thinking."""
        self.table.print_action(self, "is sleeping")
        sleep_ms(self.table.rules.time_sleep)
        self.table.print_action(self, "is thinking")

    def run(self) -> None:
        """Alternate eating and resting until the dinner is over."""
        while True:
            if self.id % 2 == 0:
                self.eat()
                self.rest()
            else:
                self.rest()
                self.eat()
            if self.table.is_finished():
                break


class Table:
    """Holds the shared state of one dinner and runs it."""

    def __init__(self, rules: Rules, output: TextIO) -> None:
        self.rules = rules
        self.output = output
        self.start_time = current_time()
        self.print_lock = threading.Lock()
        self.meal_lock = threading.Lock()
        self.finish_lock = threading.Lock()
        self._finished = False
        self.forks = [threading.Lock() for _ in range(rules.num_philo)]
        self.philosophers = [
            Philosopher(
                index + 1,
                self,
                self.forks[index],
                self.forks[(index + 1) % rules.num_philo],
            )
            for index in range(rules.num_philo)
        ]

    def _write(self, line: str) -> None:
        self.output.write(line + "\n")
        self.output.flush()

    def print_action(self, philosopher: Philosopher, action: str) -> None:
        """Log *action* with its timestamp, unless the dinner is over.

        A death is always logged.
        """
        if self.is_finished() and action != "died":
            return
        with self.print_lock:
            elapsed = current_time() - self.start_time
            self._write(f"{elapsed} {philosopher.id} {action}")

    def is_finished(self) -> bool:
        """Return whether the dinner has ended."""
        with self.finish_lock:
            return self._finished

    def _finish(self) -> None:
        with self.finish_lock:
            self._finished = True

    def check_death(self, philosopher: Philosopher) -> bool:
        """End the dinner and return True if *philosopher* has starved."""
        with self.meal_lock:
            hunger = current_time() - philosopher.last_meal
        if self.is_finished():
            return False
        if hunger > self.rules.time_die:
            self._finish()
            self.print_action(philosopher, "died")
            return True
        return False

    def check_meals(self) -> bool:
        """End the dinner and return True once everyone has eaten enough."""
        if not self.rules.check_meal:
            return False
        with self.meal_lock:
            everyone_fed = all(
                p.meals_eaten >= self.rules.num_meals for p in self.philosophers
            )
        if everyone_fed:
            self._finish()
        return everyone_fed

    def monitor(self) -> None:
        """Watch the diners until one starves or all have eaten enough."""
        while not self.is_finished():
            if any(self.check_death(p) for p in self.philosophers):
                break
            if self.check_meals():
                break
            time.sleep(_MONITOR_POLL_SECONDS)

    def _lonely_dinner(self) -> None:
        # With a single fork the only diner can never eat.
        self._write("0 1 has taken a fork")
        self._write("0 1 is thinking")
        sleep_ms(self.rules.time_die)
        self._write(f"{self.rules.time_die} 1 died")

    def run(self) -> None:
        """Run the whole dinner, returning when every diner has stopped."""
        rules = self.rules
        if rules.check_meal and rules.num_meals == 0:
            return
        self.start_time = current_time()
        for philosopher in self.philosophers:
            philosopher.last_meal = self.start_time
        if rules.num_philo == 1:
            self._lonely_dinner()
            return
        if rules.num_philo < 1:
            return
        threads = [
            threading.Thread(target=p.run, name=f"philosopher-{p.id}", daemon=True)
            for p in self.philosophers
        ]
        for thread in threads:
            thread.start()
        self.monitor()
        for thread in threads:
            thread.join()