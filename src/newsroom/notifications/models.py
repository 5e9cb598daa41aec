"""Transfer records sent through the notification transports.

These are flat, serializable views of the domain: transports never see
News or Journalist objects.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class MailMessage(BaseModel):
    """Plain-text mail message. Serializes with ``from``/``to`` keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sender: str = Field(alias="from")
    recipient: str = Field(alias="to")
    subject: str
    body: str


class Priority(str, Enum):
    """Dashboard priority derived from a news item's importance."""

    high = "A"  # important
    medium = "M"  # moderately important
    low = "C"


class DashboardItem(BaseModel):
    """One news item as shown on the dashboard."""

    model_config = ConfigDict(frozen=True)

    code: str
    body: str
    journalist_name: str
    priority: Priority


class DashboardPayload(BaseModel):
    """A whole confirmed batch, sent to the dashboard in a single call."""

    model_config = ConfigDict(frozen=True)

    title: str
    items: tuple[DashboardItem, ...] = ()
