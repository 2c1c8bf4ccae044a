"""Composite - employees form a tree that is traversed uniformly."""

from typing import Iterator, List, Tuple


class Employee:
    def __init__(self, name: str, dept: str, salary: float):
        self.name = name
        self.dept = dept
        self.salary = salary
        self._subordinates: List['Employee'] = []

    def add(self, employee: 'Employee') -> None:
        self._subordinates.append(employee)

    def remove(self, employee: 'Employee') -> None:
        self._subordinates.remove(employee)

    @property
    def subordinates(self) -> List['Employee']:
        return list(self._subordinates)

    def walk(self, depth: int = 0) -> Iterator[Tuple[int, 'Employee']]:
        """Depth-first, pre-order traversal yielding (depth, employee)."""
        yield depth, self
        for subordinate in self._subordinates:
            yield from subordinate.walk(depth + 1)

    def total_salary(self) -> float:
        return self.salary + sum(sub.total_salary() for sub in self._subordinates)

    def __str__(self) -> str:
        return f"Employee :[ Name : {self.name}, dept : {self.dept}, salary :{self.salary} ]"


def build_organization() -> Employee:
    ceo = Employee("John", "CEO", 30000)
    head_sales = Employee("Robert", "Head Sales", 20000)
    head_marketing = Employee("Michel", "Head Marketing", 20000)

    ceo.add(head_sales)
    ceo.add(head_marketing)

    head_sales.add(Employee("Richard", "Sales", 10000))
    head_sales.add(Employee("Rob", "Sales", 10000))
    head_marketing.add(Employee("Laura", "Marketing", 10000))
    head_marketing.add(Employee("Bob", "Marketing", 10000))
    return ceo


def demo():
    ceo = build_organization()
    lines = ["  " * depth + str(employee) for depth, employee in ceo.walk()]
    lines.append(f"Total payroll: {ceo.total_salary()}")
    return lines
