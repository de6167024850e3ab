"""
Field-name convention between Python attributes and Bybit wire keys.

Bybit V5 uses camelCase keys whose word boundaries follow the Python
snake_case names, including digit-led words:

    order_link_id   -> orderLinkId
    price_24h_pcnt  -> price24hPcnt
    high_price_24h  -> highPrice24h

Irregular keys (bid1Price, accountIMRate, totalOrderIM, ...) do not follow
this rule and are declared per field with an explicit alias instead.
Decoding inverts the mapping through the same alias table, so there is no
separate camel-to-snake routine.
"""


def to_camel(name: str) -> str:
    """
    Convert a snake_case attribute name to its camelCase wire token.

    The first word is lower-cased; every following word has only its first
    character upper-cased, so "24h" stays "24h" rather than becoming "24H".
    """
    words = [w for w in name.split("_") if w]
    if not words:
        return name
    head, *tail = words
    return head.lower() + "".join(w[:1].upper() + w[1:] for w in tail)
