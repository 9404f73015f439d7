"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

DEFAULT_EMPLOYEE = "test@example.com"
DEFAULT_TOTAL_LEAVES = 20
DEFAULT_LEAVE_DAYS = 1

DEFAULT_SETTINGS = {
    "companyName": "Singh Automation",
    "emailNotifications": True,
    "defaultTimeZone": "UTC",
}

# Seeded when the users collection is first listed or written.
DEFAULT_USERS = (
    {
        "name": "Admin User",
        "email": "admin",
        "password": "admin",
        "role": "admin",
        "country": "India",
        "manager": "",
        "managerEmail": "",
    },
    {
        "name": "Bhargav",
        "email": "bhargav",
        "password": "BNG",
        "role": "user",
        "country": "India",
        "manager": "Admin User",
        "managerEmail": "admin",
    },
)

SAFETY_QUESTIONS = (
    "Are you wearing all required Personal Protective Equipment (PPE) for your task today?",
    "Have you inspected your tools, machines, or equipment for any visible damage or malfunction?",
    "Is your work area clean, organized, and free from slip/trip hazards?",
    "Are all emergency stop buttons and safety interlocks functional and accessible?",
    "Are all wires, cables, and hoses properly managed to avoid entanglement or tripping?",
    "Have you seen or experienced anything unsafe today that should be reported?",
    "Have you reviewed and acknowledged today's safety briefing or posted instructions?",
)
