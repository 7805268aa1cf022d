from sqlalchemy import (
    Column,
    Integer,
    String,
    Float,
    Text,
    DateTime,
    func,
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Price(Base):
    __tablename__ = "prices"

    id = Column(Integer, primary_key=True, index=True)
    item = Column(String, nullable=False, unique=True, index=True)  # Title-cased, e.g. "Parle G Biscuits"
    price = Column(Float, nullable=False)
    source_text = Column(Text, nullable=True)  # Utterance that last set this price
    last_update_comment = Column(String, nullable=True)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Price {self.item}={self.price}>"
