"""Kinds of documented elements and the payload keys that hold them."""

CLASS = "class"
INTERFACE = "interface"
TYPEDEF = "typedef"
PROP = "prop"
METHOD = "method"
EVENT = "event"
PARAM = "param"

# Top-level payload sections, in adoption order.
TOP_LEVEL_KINDS = ("classes", "typedefs", "interfaces")

PRIVATE = "private"
PUBLIC = "public"
STATIC = "static"
