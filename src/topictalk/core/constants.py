"""Core constants and fixed replies."""

# Replies of the canned-response layer that start with this prefix are
# re-fed into the dialogue pipeline instead of being returned.
DIRECTIVE_PREFIX = "FORMAT:"

IDK = "I'm afraid I don't know anything about that topic."
NOT_UNDERSTOOD = "I'm sorry, but I don't understand what you are asking."
EXHAUSTED = "I've said all I can about that topic!"
NO_ANSWER = "I don't know."

DEFAULT_NOVELTY_AMOUNT = 5

# Machine-readable reply: ID:<index>:Speak:<line>:<novelty>
MACHINE_REPLY_TEMPLATE = "ID:{index}:Speak:{line}:{novelty}"
