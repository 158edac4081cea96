import json
from urllib.parse import parse_qs

import httpx
import pytest

SHOW_ID = 11474

ROSTER = {
    "riderData": [
        {"riderID": 1, "riderName": '<a href="/show/rider/1">John Smith</a>'},
        {"riderID": 2, "riderName": '<a href="/show/rider/2">Jane Doe</a>'},
    ]
}

CLASSES = {
    "classData": [
        {"classID": "412", "className": "Grand Prix 1.40m", "ring": "Main"},
    ]
}

# 2025-05-09 is a Friday
JANE_ENTRIES = {
    "riderPageData": [
        {
            "classText": '<a href="/show/class/412">412</a>',
            "test": None,
            "ring": "Main",
            "day": "2025-05-09T00:00:00",
            "rideTime": "2025-05-09T08:30:00",
        },
        {
            "classText": '<a href="/show/class/415">415</a>',
            "test": "Young Horse 5yo",
            "ring": "Combine Obstacle",
            "day": "2025-05-10T00:00:00",
            "rideTime": "2025-05-10T14:05:00",
        },
        {
            "classText": '<a href="/show/class/420">420</a>',
            "test": "Speed 1.20m",
            "ring": "Sand",
            "day": "2025-05-11T00:00:00",
            "rideTime": "2025-05-11T09:00:00",
        },
    ]
}


def make_show_transport(
    roster=ROSTER, classes=CLASSES, riders=None, failing=()
) -> httpx.MockTransport:
    """MockTransport serving the three show endpoints.

    riders maps riderID -> payload; paths in failing answer HTTP 500, and a
    rider id listed in failing answers 500 on the rider endpoint only.
    """
    riders = riders if riders is not None else {2: JANE_ENTRIES}

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        params = parse_qs(request.url.query.decode())
        if path in failing:
            return httpx.Response(500, text="Server Error")
        if path == "/show/GetRiderData":
            return httpx.Response(200, text=json.dumps(roster))
        if path == "/show/GetClassData":
            return httpx.Response(200, text=json.dumps(classes))
        if path == "/show/GetAllRiderData":
            rider_id = int(params["id"][0])
            if rider_id in failing:
                return httpx.Response(500, text="Server Error")
            return httpx.Response(200, text=json.dumps(riders.get(rider_id, {"riderPageData": []})))
        return httpx.Response(404, text="Not Found")

    return httpx.MockTransport(handler)


@pytest.fixture
def show_transport():
    return make_show_transport()


@pytest.fixture
def transport_factory():
    return make_show_transport


@pytest.fixture
def jane_entries():
    return JANE_ENTRIES
