"""Result formatter: renders one ticket as preview and detail card text.

Pure and synchronous. Text layout:

    Request: <title> | <Open|Closed> | <date created>

The title segment is skipped when the ticket has no title, the date segment
when it has no creation date. In preview text a title longer than
TEXT_TRIM_LENGTH_FOR_CARD characters is cut to that length plus "...".
"""

from app.application.dtos.ticket import TicketEntity
from app.core.constants import TEXT_TRIM_LENGTH_FOR_CARD
from app.domain.enums import TicketState
from app.schemas.messaging_extension import (
    CardAttachment,
    MessagingExtensionAttachment,
    ThumbnailCard,
)

SEGMENT_DELIMITER = " | "
TITLE_PREFIX = "Request: "
ELLIPSIS = "..."


def _status_label(status: int) -> str:
    # Any stored value other than 0 counts as closed
    return "Open" if status == TicketState.OPEN else "Closed"


def format_card_text(ticket: TicketEntity, is_preview: bool) -> str:
    """Return the card text for ticket; is_preview selects the trimmed title."""
    parts: list[str] = []
    if ticket.title:
        title = ticket.title
        if is_preview and len(title) > TEXT_TRIM_LENGTH_FOR_CARD:
            title = title[:TEXT_TRIM_LENGTH_FOR_CARD] + ELLIPSIS
        parts.append(TITLE_PREFIX + title)

    parts.append(SEGMENT_DELIMITER + _status_label(ticket.status))

    if ticket.date_created is not None:
        parts.append(SEGMENT_DELIMITER + str(ticket.date_created))

    return "".join(parts)


def build_attachment(ticket: TicketEntity) -> MessagingExtensionAttachment:
    """Build the list entry for ticket: detail card as content, preview card as preview.

    Both cards are titled with the assignee name.
    """
    preview_card = ThumbnailCard(
        title=ticket.assigned_to_name,
        text=format_card_text(ticket, is_preview=True),
    )
    card = ThumbnailCard(
        title=ticket.assigned_to_name,
        text=format_card_text(ticket, is_preview=False),
    )
    return MessagingExtensionAttachment(
        content=card,
        preview=CardAttachment(content=preview_card),
    )
