import datetime

from sqlalchemy import Column, Integer, String, Numeric, Date, Text, Index, func
from sqlalchemy.types import TypeDecorator

from restaurant_service.database import Base


class IsoDate(TypeDecorator):
    """Date column that also takes 'YYYY-MM-DD' strings, the way PostgreSQL does."""
    impl = Date
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if isinstance(value, str):
            # Timestamps are cut to their date part
            if len(value) > 10:
                return datetime.datetime.fromisoformat(value).date()
            return datetime.date.fromisoformat(value)
        return value


class Admin(Base):
    __tablename__ = "tbl_admin"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), nullable=False)
    # Plaintext, as the frontend expects it back
    password = Column(String(100))


class Staff(Base):
    __tablename__ = "tbl_staff"

    staffid = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), nullable=False)
    password = Column(String(100))
    status = Column(String(50))
    role = Column(String(50))


class Role(Base):
    __tablename__ = "tbl_role"

    role = Column(String(50), primary_key=True)

    __table_args__ = (
        # Names differing only in case are the same role
        Index("ux_role_lower", func.lower(role), unique=True),
    )


class Menu(Base):
    __tablename__ = "tbl_menu"

    menuid = Column(Integer, primary_key=True, index=True)
    menuname = Column(String(100), nullable=False)


class MenuItem(Base):
    __tablename__ = "tbl_menuitem"

    itemid = Column(Integer, primary_key=True, index=True)
    menuid = Column(Integer, index=True)
    menuitemname = Column(String(100), nullable=False)
    price = Column(Numeric(10, 2))


class Order(Base):
    __tablename__ = "tbl_order"

    orderID = Column(Integer, primary_key=True, index=True)
    status = Column(String(50))
    total = Column(Numeric(10, 2))
    order_date = Column(IsoDate, index=True)


class OrderDetail(Base):
    __tablename__ = "tbl_orderdetail"

    orderDetailID = Column(Integer, primary_key=True, index=True)
    orderID = Column(Integer, index=True)
    itemID = Column(Integer)
    quantity = Column(Integer)


class Report(Base):
    __tablename__ = "tbl_reports"

    reportID = Column(Integer, primary_key=True, index=True)
    report_date = Column(IsoDate, index=True)
    report_data = Column(Text)
    adminid = Column(Integer)
