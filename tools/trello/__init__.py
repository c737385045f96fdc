"""
Trello tools — board, list and card operations over the Trello REST API.
"""

from tools.trello import (
    cards_list, card_create, card_update, card_delete,
    boards_list, lists_list, card_done, setup_help,
)


TOOLS = [
    cards_list.TOOL,
    card_create.TOOL,
    card_update.TOOL,
    card_delete.TOOL,
    boards_list.TOOL,
    lists_list.TOOL,
    card_done.TOOL,
    setup_help.TOOL,
]

HANDLERS = {
    "trello_list": cards_list.handle,
    "trello_add": card_create.handle,
    "trello_update": card_update.handle,
    "trello_delete": card_delete.handle,
    "trello_boards": boards_list.handle,
    "trello_lists": lists_list.handle,
    "trello_done": card_done.handle,
    "trello_setup": setup_help.handle,
}
