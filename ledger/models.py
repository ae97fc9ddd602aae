import enum
from sqlalchemy import Column, Integer, String, Date, DateTime, Numeric, Enum
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()

# --- Enums ---
class AccountType(enum.Enum):
    WALLET = "WALLET"
    CHECKING = "CHECKING"
    SAVINGS = "SAVINGS"

class ExpenseCategory(enum.Enum):
    FOOD = "FOOD"
    EDUCATION = "EDUCATION"
    LEISURE = "LEISURE"
    HOUSING = "HOUSING"
    CLOTHING = "CLOTHING"
    HEALTH = "HEALTH"
    TRANSPORT = "TRANSPORT"
    OTHER = "OTHER"

class RevenueCategory(enum.Enum):
    SALARY = "SALARY"
    GIFT = "GIFT"
    PRIZE = "PRIZE"
    OTHER = "OTHER"

# --- Models ---

class Account(Base):
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    balance = Column(Numeric(18, 2), nullable=False)
    account_type = Column(Enum(AccountType, name="account_type"), nullable=False)
    financial_institution = Column(String(255), nullable=False)
    # Optimistic-lock counter, bumped by the ORM on every UPDATE
    version = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self):
        return f"<Account(id={self.id}, balance={self.balance}, account_type='{self.account_type.value}')>"

class Expense(Base):
    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    value = Column(Numeric(18, 2), nullable=False)
    occurred = Column(Date, nullable=False, index=True)
    expected = Column(Date, nullable=False)
    # Tag only: not a foreign key to accounts
    account = Column(Integer, nullable=False)
    category = Column(Enum(ExpenseCategory, name="expense_category"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Expense(id={self.id}, value={self.value}, category='{self.category.value}')>"

class Revenue(Base):
    __tablename__ = "revenues"

    id = Column(Integer, primary_key=True, autoincrement=True)
    value = Column(Numeric(18, 2), nullable=False)
    occurred = Column(Date, nullable=False, index=True)
    expected = Column(Date, nullable=False)
    description = Column(String(255), nullable=False)
    account = Column(Integer, nullable=False)
    category = Column(Enum(RevenueCategory, name="revenue_category"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Revenue(id={self.id}, value={self.value}, category='{self.category.value}')>"
