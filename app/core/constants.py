"""Core constants: messaging extension protocol literals.

These values are part of the contract with the client app manifest and
must match it exactly.
"""

# Activity name of a messaging extension search query
QUERY_ACTIVITY_NAME = "composeExtension/query"

# Parameter name declared for the search box in the app manifest
SEARCH_TEXT_PARAMETER_NAME = "searchText"

# Appended to every query so the backend does prefix matching
PREFIX_MATCH_WILDCARD = "*"

# Preview cards show at most this many title characters
TEXT_TRIM_LENGTH_FOR_CARD = 10

RESULT_TYPE = "result"
ATTACHMENT_LAYOUT_LIST = "list"
THUMBNAIL_CARD_CONTENT_TYPE = "application/vnd.microsoft.card.thumbnail"

INVOKE_RESPONSE_STATUS_OK = 200
