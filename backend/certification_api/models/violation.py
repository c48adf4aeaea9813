from sqlalchemy import Column, Integer, String, DateTime
from ..core.database import Base
from ..utils.timezone import get_utc_now


class Violation(Base):
    __tablename__ = "violations"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(String, nullable=False)
    timestamp = Column(DateTime(timezone=True), default=get_utc_now, index=True)

    def __repr__(self):
        return f"<Violation {self.type} at {self.timestamp}>"
