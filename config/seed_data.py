"""
Seed data for the directory store and the homepage.

Offices and salespeople are loaded once into the directory store at startup.
Employees and news items are only used for homepage display.
"""
from typing import Dict, List, Any


# ============================================================================
# Offices
# ============================================================================

OFFICES: List[Dict[str, Any]] = [
    {
        "id": "scranton",
        "name": "Scranton Branch",
        "location": "1725 Slough Avenue, Scranton, PA",
        "salesperson_ids": ["michael_scott", "jim_halpert", "dwight_schrute"],
    },
    {
        "id": "stamford",
        "name": "Stamford Branch",
        "location": "Stamford, CT",
        "salesperson_ids": ["andy_bernard"],
    },
    {
        "id": "nashua",
        "name": "Nashua Branch",
        "location": "Nashua, NH",
        "salesperson_ids": ["holly_flax"],
    },
    {
        "id": "utica",
        "name": "Utica Branch",
        "location": "Utica, NY",
        "salesperson_ids": ["karen_filippelli"],
    },
    {
        "id": "buffalo",
        "name": "Buffalo Branch",
        "location": "Buffalo, NY",
        "salesperson_ids": ["jerry_dicanio"],
    },
]


# ============================================================================
# Salespeople (seed order is the matching order)
# ============================================================================

SALESPEOPLE: List[Dict[str, Any]] = [
    {
        "id": "michael_scott",
        "name": "Michael Scott",
        "title": "Regional Manager",
        "office_id": "scranton",
        "available": True,
        "quote": "That's what she said!",
    },
    {
        "id": "jim_halpert",
        "name": "Jim Halpert",
        "title": "Sales Representative",
        "office_id": "scranton",
        "available": True,
        "quote": "Bears. Beets. Battlestar Galactica.",
    },
    {
        "id": "dwight_schrute",
        "name": "Dwight K. Schrute",
        "title": "Assistant Regional Manager",
        "office_id": "scranton",
        "available": True,
        "quote": "FACT: Bears eat beets.",
    },
    {
        "id": "andy_bernard",
        "name": "Andy Bernard",
        "title": "Regional Director in Charge of Sales",
        "office_id": "stamford",
        "available": True,
        "quote": "I went to Cornell. Ever heard of it?",
    },
    {
        "id": "holly_flax",
        "name": "Holly Flax",
        "title": "HR Representative",
        "office_id": "nashua",
        "available": True,
        "quote": "It's a pleasure to meet you.",
    },
    {
        "id": "karen_filippelli",
        "name": "Karen Filippelli",
        "title": "Regional Manager",
        "office_id": "utica",
        "available": True,
        "quote": "Utica is a great branch.",
    },
    {
        "id": "jerry_dicanio",
        "name": "Jerry DiCanio",
        "title": "Branch Manager",
        "office_id": "buffalo",
        "available": False,
        "quote": "We're closing up shop here.",
    },
]


# ============================================================================
# Homepage content
# ============================================================================

EMPLOYEES: List[Dict[str, Any]] = [
    {
        "name": "Michael Scott",
        "title": "Regional Manager",
        "department": "Management",
        "years_service": 15,
        "photo": "/static/images/michael.jpg",
        "quote": "That's what she said!",
    },
    {
        "name": "Jim Halpert",
        "title": "Sales Representative",
        "department": "Sales",
        "years_service": 8,
        "photo": "/static/images/jim.jpg",
        "quote": "Bears. Beets. Battlestar Galactica.",
    },
    {
        "name": "Dwight K. Schrute",
        "title": "Assistant Regional Manager",
        "department": "Sales",
        "years_service": 10,
        "photo": "/static/images/dwight.jpg",
        "quote": "FACT: Bears eat beets.",
    },
    {
        "name": "Pam Beesly",
        "title": "Office Administrator",
        "department": "Administration",
        "years_service": 7,
        "photo": "/static/images/pam.jpg",
        "quote": "I'm really happy I'm here.",
    },
]

NEWS: List[Dict[str, Any]] = [
    {
        "title": "Infinity 2.0 Launch: Revolutionary Upgrade!",
        "content": (
            "Our new Infinity 2.0 system promises 400% more efficiency with 73% fewer bugs "
            "than the previous version. Features include: Advanced CRM integration, "
            "Mobile-first design, AI-powered paper recommendations, and Blockchain-based "
            "supply chain tracking."
        ),
        "date": "2024-01-15",
        "author": "Ryan Howard",
    },
    {
        "title": "Q4 Sales Records Broken Again!",
        "content": (
            "Thanks to our innovative sales strategies and the power of Infinity 2.0, "
            "Scranton branch has exceeded all expectations. Special recognition goes to "
            "our top performers in the field."
        ),
        "date": "2024-01-10",
        "author": "Michael Scott",
    },
    {
        "title": "New Mobile App Available",
        "content": (
            "Download the Dunder Mifflin Infinity 2.0 mobile app for real-time paper "
            "ordering, inventory tracking, and exclusive paper deals. Available on "
            "BlackBerry and iPhone."
        ),
        "date": "2024-01-08",
        "author": "IT Department",
    },
]

COMPANY_NAME: str = "Dunder Mifflin Paper Company"
SITE_VERSION: str = "2.0"
