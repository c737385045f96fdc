"""
Text rendering for Trello cards, lists and boards.
"""

from datetime import datetime

DESC_LIMIT = 100


def format_due(value: str) -> str:
    """Render a Trello due timestamp as the locale's short date, in local time."""
    try:
        # fromisoformat doesn't accept a trailing "Z" on older Pythons
        due = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    return due.astimezone().strftime("%x")


def format_card(card: dict, index: int) -> str:
    """Format a card as a numbered block. `index` is 0-based."""
    status = "🔴 Done" if card.get("closed") else "🟢 In Progress"
    labels = card.get("labels") or []
    labels_str = " ".join(f"[{l.get('color')} {l.get('name')}]" for l in labels)
    due_str = f" 📅 {format_due(card['due'])}" if card.get("due") else ""

    desc = card.get("desc") or ""
    desc_str = ""
    if desc:
        more = "..." if len(desc) > DESC_LIMIT else ""
        desc_str = f"\n   {desc[:DESC_LIMIT]}{more}"

    return (
        f"{index + 1}. {status} {card.get('name')}{due_str}{labels_str}\n"
        f"   ID: {card.get('shortLink')}\n"
        f"   List: {card.get('idList')}{desc_str}"
    )


def format_list(lst: dict, index: int) -> str:
    status = "🔴 Closed" if lst.get("closed") else "🟢 Open"
    return f"{index + 1}. {status} {lst.get('name')}\n   ID: {lst.get('id')}"


def format_board(board: dict, index: int) -> str:
    return f"{index + 1}. 📋 {board.get('name')}\n   ID: {board.get('id')}\n   URL: {board.get('url')}"


def format_many(records: list[dict], formatter) -> str:
    """Format records with `formatter`, separated by blank lines."""
    return "\n\n".join(formatter(record, i) for i, record in enumerate(records))
