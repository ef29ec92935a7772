"""Order domain constants.

The status vocabulary and transition table live in
``modules.shipments.constants``; orders reference stored statuses by FK.
"""

ORDER_NUMBER_MAX_RETRIES = 5

CREATION_NOTE = "Order created"
