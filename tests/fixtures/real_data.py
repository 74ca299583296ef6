"""
Real-world test data for FuzzySim testing.

Contains realistic examples of:
- Command names as typed into a fuzzy command picker
- Person and company names with typos and variations
"""

# Method-style commands, ranked against the abbreviated query "geU"
COMMANDS = [
    "getUser",
    "getFirstName",
    "getUsers",
    "getAll",
    "assignUserToGroup",
    "box",
    "unbox",
]

COMMAND_QUERY = "geU"

# (typed, intended) pairs a user might enter
TYPO_PAIRS = [
    ("Jhon Smith", "John Smith"),
    ("recieve", "receive"),
    ("definately", "definitely"),
    ("pulp ficton", "Pulp Fiction"),
    ("Micheal Johnson", "Michael Johnson"),
    ("Elisabeth Taylor", "Elizabeth Taylor"),
    ("ABC Corp", "ABC Corporation"),
    ("PENNCISYLVNIA", "PENNSYLVANIA"),
]
