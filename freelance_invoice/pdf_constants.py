"""Page geometry for the invoice layout (centimetres, top-left origin, A4)."""

from __future__ import annotations

from datetime import datetime, timezone

PAGE_FORMAT = "A4"
UNIT = "cm"

FONT_FAMILY = "helvetica"
FONT_SIZE_NORMAL = 10
FONT_SIZE_BALANCE = 12
FONT_SIZE_TITLE = 30

# Fixed so repeated renders of one invoice are byte-identical.
CREATION_DATE = datetime(2000, 1, 1, tzinfo=timezone.utc)

X_LEFT = 1.0
X_TITLE = 15.0
X_BALANCE_LABEL = 12.0
X_BALANCE_VALUE = 15.0
X_TOTALS_LABEL = 12.0
RIGHT_EDGE = 18.0

# Item table columns
X_ITEM = 1.0
X_QTY = 10.0
X_RATE = 13.0
X_AMOUNT = 16.0

# Identity block
NAME_Y = 1.5
ADDRESS_Y = 2.0
STATE_Y = 2.5

# Title block
TITLE_Y = 2.0
NUMBER_Y = 2.5
DATE_Y = 3.0

# Bill-to block
BILL_TO_LABEL_Y = 5.0
BILL_TO_NAME_Y = 5.75
BILL_TO_ADDR_Y = 6.1
BILL_TO_STATE_Y = 6.45

BALANCE_Y = 6.0

ITEM_HEADER_Y = 9.0
RULE_Y = 9.2
RULE_WIDTH = 0.05
ITEM_ROW_Y = 10.0

TOTALS_START_Y = 12.0
TOTAL_ROW_H = 0.5

NOTES_LABEL_Y = 15.0
NOTES_TEXT_Y = 15.5
TERMS_LABEL_Y = 18.0
TERMS_TEXT_Y = 18.5
