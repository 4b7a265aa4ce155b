# tempero/models/__init__.py
from .customer import Customer
from .supplier import Supplier
from .sale import Sale, PaymentStatus
from .expense import Expense, ExpenseCategory
