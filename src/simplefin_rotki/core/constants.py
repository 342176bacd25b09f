"""Protocol constants shared by the bridge handlers and the SimpleFin client."""


class BridgeConstants:
    """Paths that make up claim links and access URLs."""

    # Claim links and access URLs are {PUBLIC_URL}{TOKEN_PATH_PREFIX}/{token}
    TOKEN_PATH_PREFIX = "/f"
    # SimpleFin clients poll {access URL}{ACCOUNTS_SUFFIX}
    ACCOUNTS_SUFFIX = "/accounts"


class SimpleFinConstants:
    """Values fixed by the Rotki-to-SimpleFin mapping."""

    # Rotki balances are read from the usd_value field
    CURRENCY = "usd"
    # Query parameter SimpleFin clients send when polling accounts
    START_DATE_PARAM = "start-date"
