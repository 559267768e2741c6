from tenant_router.routing_service.decision import resolve, route
from tenant_router.shared.models import (
    PassThrough,
    Redirect,
    RequestDescriptor,
    Rewrite,
    routing_decision_adapter,
)


def test_admin_is_blocked_on_subdomain():
    assert route("/admin", "acme") == Redirect(path="/")
    assert route("/admin/x", "acme") == Redirect(path="/")
    assert route("/administrators", "acme") == Redirect(path="/")


def test_root_path_is_rewritten_to_tenant_page():
    assert route("/", "acme") == Rewrite(path="/s/acme")


def test_other_paths_pass_through_on_subdomain():
    assert route("/foo", "acme") == PassThrough()
    assert route("/s/acme", "acme") == PassThrough()


def test_no_subdomain_always_passes_through():
    for path in ("/", "/admin", "/admin/x", "/foo"):
        assert route(path, None) == PassThrough()


def test_empty_subdomain_is_treated_as_missing():
    assert route("/", "") == PassThrough()


def test_scenario_tenant_home():
    request = RequestDescriptor(url="https://shop.example.com/", host_header="shop.example.com", path="/")
    assert resolve(request, "example.com") == ("shop", Rewrite(path="/s/shop"))


def test_scenario_admin_on_root_domain():
    request = RequestDescriptor(url="https://example.com/admin", host_header="example.com", path="/admin")
    assert resolve(request, "example.com") == (None, PassThrough())


def test_observer_receives_trace():
    traces = []
    request = RequestDescriptor(url="https://shop.example.com/admin", host_header="shop.example.com", path="/admin")

    resolve(request, "example.com", observer=traces.append)

    assert len(traces) == 1
    trace = traces[0]
    assert trace.host == "shop.example.com"
    assert trace.pathname == "/admin"
    assert trace.subdomain == "shop"
    assert trace.root_domain == "example.com"
    assert trace.decision == Redirect(path="/")


def test_decision_json_roundtrip():
    decision = routing_decision_adapter.validate_json('{"kind": "rewrite", "path": "/s/acme"}')
    assert decision == Rewrite(path="/s/acme")
    assert routing_decision_adapter.validate_python({"kind": "pass_through"}) == PassThrough()
