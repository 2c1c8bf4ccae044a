"""Command - wrap stock orders as objects the Broker queues and executes."""

from abc import ABC, abstractmethod
from typing import List

from gof_patterns.infrastructure.logging import get_logger

logger = get_logger(__name__)


class Stock:
    """Receiver."""

    def __init__(self, name: str = "ABC", quantity: int = 10):
        self.name = name
        self.quantity = quantity
        self.position = 0

    def buy(self) -> str:
        self.position += self.quantity
        return f"Stock [ Name: {self.name}, Quantity: {self.quantity} ] bought"

    def sell(self) -> str:
        self.position -= self.quantity
        return f"Stock [ Name: {self.name}, Quantity: {self.quantity} ] sold"


class Order(ABC):
    @abstractmethod
    def execute(self) -> str:
        pass


class BuyStock(Order):
    def __init__(self, stock: Stock):
        self._stock = stock

    def execute(self) -> str:
        return self._stock.buy()


class SellStock(Order):
    def __init__(self, stock: Stock):
        self._stock = stock

    def execute(self) -> str:
        return self._stock.sell()


class Broker:
    """Invoker: queues orders and runs them FIFO."""

    def __init__(self):
        self._orders: List[Order] = []

    @property
    def pending(self) -> int:
        return len(self._orders)

    def take_order(self, order: Order) -> None:
        self._orders.append(order)

    def place_orders(self) -> List[str]:
        orders, self._orders = self._orders, []
        logger.debug("Placing orders", count=len(orders))
        return [order.execute() for order in orders]


def demo():
    stock = Stock()
    broker = Broker()
    broker.take_order(BuyStock(stock))
    broker.take_order(SellStock(stock))
    return broker.place_orders()
