from datetime import datetime, timezone

import httpx
import respx

from cityguide.domain.cities import SALT_LAKE
from cityguide.providers.events.ticketmaster import TicketmasterEventsProvider

TM_URL = TicketmasterEventsProvider.BASE_URL
# 21:30 on Oct 17 in Salt Lake City.
REFERENCE = datetime(2026, 10, 18, 3, 30, tzinfo=timezone.utc)


def _raw(event_id, name="Show", date_time=None, local_date=None, **extra):
    start = {}
    if date_time:
        start["dateTime"] = date_time
    if local_date:
        start["localDate"] = local_date
    payload = {"id": event_id, "name": name, "dates": {"start": start}}
    payload.update(extra)
    return payload


def _page(*events):
    return {"_embedded": {"events": list(events)}}


def test_ticketmaster_datetime_format():
    dt = datetime(2026, 2, 9, 18, 43, 14, 156741, tzinfo=timezone.utc)
    formatted = TicketmasterEventsProvider._format_ts(dt)
    assert formatted == "2026-02-09T18:43:14Z"
    assert "." not in formatted


def test_window_params_anchor_on_city_local_today():
    provider = TicketmasterEventsProvider(api_key="secret")
    params = provider.build_params(SALT_LAKE, REFERENCE)

    assert params["startDateTime"] == "2026-10-17T00:00:00Z"
    assert params["endDateTime"] == "2026-10-23T00:00:00Z"
    assert params["city"] == "Salt Lake City"
    assert params["stateCode"] == "UT"
    assert params["countryCode"] == "US"
    assert params["sort"] == "date,asc"
    assert params["size"] == 100


@respx.mock(assert_all_called=False)
def test_missing_key_skips_network(monkeypatch):
    monkeypatch.delenv("TM_API_KEY", raising=False)
    route = respx.get(TM_URL).mock(return_value=httpx.Response(200, json=_page()))
    provider = TicketmasterEventsProvider(api_key=None)

    assert provider.fetch_events(SALT_LAKE, reference=REFERENCE) == []
    assert not route.called


@respx.mock
def test_fetch_sends_window_and_maps_events():
    route = respx.get(TM_URL).mock(
        return_value=httpx.Response(
            200,
            json=_page(
                _raw("b", "Later", date_time="2026-10-19T02:00:00Z"),
                _raw("a", "Tonight", date_time="2026-10-18T02:00:00Z"),
            ),
        )
    )
    provider = TicketmasterEventsProvider(api_key="secret")

    events = provider.fetch_events(SALT_LAKE, reference=REFERENCE)

    request = route.calls.last.request
    assert request.url.params["apikey"] == "secret"
    assert request.url.params["startDateTime"] == "2026-10-17T00:00:00Z"
    assert request.url.params["endDateTime"] == "2026-10-23T00:00:00Z"
    assert [evt.id for evt in events] == ["a", "b"]
    assert [evt.local_date for evt in events] == ["2026-10-17", "2026-10-18"]


@respx.mock
def test_fetch_dedupes_and_sorts():
    respx.get(TM_URL).mock(
        return_value=httpx.Response(
            200,
            json=_page(
                _raw("x", "First X", date_time="2026-10-20T18:00:00Z"),
                _raw("y", "Y", date_time="2026-10-18T18:00:00Z"),
                _raw("x", "Second X", date_time="2026-10-17T18:00:00Z"),
                _raw("z", "Z", date_time="2026-10-19T18:00:00Z"),
            ),
        )
    )
    provider = TicketmasterEventsProvider(api_key="secret")

    events = provider.fetch_events(SALT_LAKE, reference=REFERENCE)

    assert [evt.id for evt in events] == ["y", "z", "x"]
    assert events[-1].name == "First X"
    starts = [evt.start_at for evt in events]
    assert starts == sorted(starts)


@respx.mock
def test_fetch_returns_empty_on_error_status():
    respx.get(TM_URL).mock(return_value=httpx.Response(500))
    provider = TicketmasterEventsProvider(api_key="secret")

    assert provider.fetch_events(SALT_LAKE, reference=REFERENCE) == []


@respx.mock
def test_fetch_returns_empty_on_transport_error():
    respx.get(TM_URL).mock(side_effect=httpx.ConnectError("boom"))
    provider = TicketmasterEventsProvider(api_key="secret")

    assert provider.fetch_events(SALT_LAKE, reference=REFERENCE) == []


@respx.mock
def test_fetch_returns_empty_on_malformed_payload():
    respx.get(TM_URL).mock(return_value=httpx.Response(200, content=b"<html>oops</html>"))
    provider = TicketmasterEventsProvider(api_key="secret")

    assert provider.fetch_events(SALT_LAKE, reference=REFERENCE) == []


@respx.mock
def test_fetch_without_embedded_events_is_empty():
    respx.get(TM_URL).mock(return_value=httpx.Response(200, json={"page": {"totalElements": 0}}))
    provider = TicketmasterEventsProvider(api_key="secret")

    assert provider.fetch_events(SALT_LAKE, reference=REFERENCE) == []


def test_map_event_full_payload():
    provider = TicketmasterEventsProvider.__new__(TicketmasterEventsProvider)
    payload = _raw(
        "evt-1",
        "Jazz Night",
        date_time="2026-10-18T03:00:00Z",
        url="https://tickets.example/evt-1",
        classifications=[{"segment": {"name": "Music"}, "genre": {"name": "Jazz"}}],
        _embedded={
            "venues": [
                {
                    "name": "Eccles Theater",
                    "neighborhood": "Downtown",
                    "address": {"line1": "131 Main St"},
                    "city": {"name": "Salt Lake City"},
                    "state": {"stateCode": "UT"},
                }
            ]
        },
    )

    event = provider._map_event(payload, SALT_LAKE)  # type: ignore[attr-defined]

    assert event.category == "Jazz"
    assert event.local_date == "2026-10-17"
    assert event.venue_name == "Eccles Theater"
    assert event.address == "131 Main St · Salt Lake City · UT"
    assert event.area == "Downtown"
    assert event.url == "https://tickets.example/evt-1"


def test_map_event_local_date_only_uses_midday_utc():
    provider = TicketmasterEventsProvider.__new__(TicketmasterEventsProvider)

    event = provider._map_event(_raw("d", local_date="2026-10-19"), SALT_LAKE)  # type: ignore[attr-defined]

    assert event.start_at == datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
    assert event.local_date == "2026-10-19"


def test_map_event_fallbacks():
    provider = TicketmasterEventsProvider.__new__(TicketmasterEventsProvider)

    bare = provider._map_event(_raw("b1", date_time="2026-10-19T18:00:00Z"), SALT_LAKE)  # type: ignore[attr-defined]
    segment_only = provider._map_event(  # type: ignore[attr-defined]
        _raw(
            "b2",
            date_time="2026-10-19T18:00:00Z",
            classifications=[{"segment": {"name": "Sports"}}],
            _embedded={"venues": [{"city": {"name": "Sandy"}}]},
        ),
        SALT_LAKE,
    )

    assert bare.category == "Event"
    assert bare.area == "Salt Lake City"
    assert bare.address is None
    assert bare.venue_name is None
    assert segment_only.category == "Sports"
    assert segment_only.area == "Sandy"
    assert segment_only.address == "Sandy"


def test_process_events_drops_incomplete_items():
    provider = TicketmasterEventsProvider.__new__(TicketmasterEventsProvider)
    items = [
        _raw("keep", date_time="2026-10-19T18:00:00Z"),
        _raw(None, date_time="2026-10-19T18:00:00Z"),
        _raw("no-name", name=None, date_time="2026-10-19T18:00:00Z"),
        _raw("no-start"),
        _raw("bad-ts", date_time="not-a-date"),
    ]

    mapped, stats = provider._process_events(items, SALT_LAKE)  # type: ignore[attr-defined]

    assert [evt.id for evt in mapped] == ["keep"]
    assert stats == {"fetched": 5, "mapped": 1, "skipped": 4, "duplicates": 0}


def test_process_events_skips_wrongly_shaped_items():
    provider = TicketmasterEventsProvider.__new__(TicketmasterEventsProvider)
    items = [
        _raw("ok", date_time="2026-10-19T18:00:00Z"),
        _raw("venue-str", date_time="2026-10-19T18:00:00Z", _embedded={"venues": ["not-a-dict"]}),
        _raw("ts-int", date_time=1760000000),
        {"id": "dates-list", "name": "Show", "dates": ["2026-10-19"]},
        _raw("class-str", date_time="2026-10-19T18:00:00Z", classifications=["Music"]),
        "not-an-event",
    ]

    mapped, stats = provider._process_events(items, SALT_LAKE)  # type: ignore[attr-defined]

    assert [evt.id for evt in mapped] == ["ok"]
    assert stats["skipped"] == 5


@respx.mock
def test_fetch_keeps_good_records_next_to_malformed_ones():
    respx.get(TM_URL).mock(
        return_value=httpx.Response(
            200,
            json=_page(
                _raw("ok", date_time="2026-10-19T18:00:00Z"),
                _raw("bad", date_time="2026-10-19T18:00:00Z", _embedded={"venues": ["not-a-dict"]}),
                _raw("bad-ts", date_time=1760000000),
            ),
        )
    )
    provider = TicketmasterEventsProvider(api_key="secret")

    events = provider.fetch_events(SALT_LAKE, reference=REFERENCE)

    assert [evt.id for evt in events] == ["ok"]
