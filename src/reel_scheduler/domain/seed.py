"""Fixed bootstrap datasets.

``SEED_VIDEOS`` populates an empty client when neither the remote store nor
the local cache can provide data. ``SERVER_SEED_VIDEOS`` initializes a fresh
data file on the reference server.
"""

from typing import Any

SEED_VIDEOS: list[dict[str, Any]] = [
    {
        "id": 1,
        "name": "Tauba Tauba",
        "contentType": "Dance",
        "shoot": "Done",
        "edit": "Done",
        "igUpload": "Uploaded",
        "ytUpload": "Not",
        "igDate": "2024-08-07",
        "ytDate": "",
        "views": 15000,
        "likes": 1200,
        "notes": "Good engagement, mostly female audience",
    },
    {
        "id": 2,
        "name": "APT",
        "contentType": "Dance",
        "shoot": "Done",
        "edit": "Done",
        "igUpload": "Uploaded",
        "ytUpload": "Not",
        "igDate": "2025-01-19",
        "ytDate": "",
        "views": 0,
        "likes": 0,
        "notes": "",
    },
    {
        "id": 6,
        "name": "Boyfriend-Karan Aujia",
        "contentType": "Music",
        "shoot": "Done",
        "edit": "Done",
        "igUpload": "Uploaded",
        "ytUpload": "Scheduled",
        "igDate": "2025-11-24",
        "ytDate": "2026-01-18",
        "views": 0,
        "likes": 0,
        "notes": "",
    },
    {
        "id": 8,
        "name": "Lover-Dijlir Dosanjh",
        "contentType": "Music",
        "shoot": "Done",
        "edit": "Done",
        "igUpload": "Uploaded",
        "ytUpload": "Scheduled",
        "igDate": "2025-12-07",
        "ytDate": "2026-01-25",
        "views": 0,
        "likes": 0,
        "notes": "",
    },
]

SERVER_SEED_VIDEOS: list[dict[str, Any]] = SEED_VIDEOS[:2]
