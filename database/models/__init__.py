from database.models.customer import Customer
from database.models.address import Address
from database.models.food_item import CATEGORIES, FoodItem
from database.models.order import ORDER_STATUSES, Order
from database.models.order_item import OrderItem
from database.models.payment import PAYMENT_MODES, Payment

# Parents before children
MODELS = (Customer, Address, FoodItem, Order, OrderItem, Payment)

__all__ = [
    "Address",
    "CATEGORIES",
    "Customer",
    "FoodItem",
    "MODELS",
    "ORDER_STATUSES",
    "Order",
    "OrderItem",
    "PAYMENT_MODES",
    "Payment",
]
