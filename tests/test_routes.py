import re
from urllib.parse import parse_qs, urlsplit

from markupsafe import escape

from config import settings
from apps.account.config import BILLING_META_KEY
from apps.home.config import DASHBOARD_META_KEY, GOAL_META_KEY
from core.layout import ONBOARDING_PROGRESS_KEY, render_page
from core.rendering import home_url, login_url


def _redirect_target(response):
    return parse_qs(urlsplit(response.headers["location"]).query)["redirect_to"][0]


# ─────────────────────────────────────────────────────────────────────────────
# Health & root
# ─────────────────────────────────────────────────────────────────────────────

def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_root_lists_apps(client):
    apps = client.get("/").json()["apps"]
    assert apps["account"]["url"] == "/account/"
    assert apps["home"]["url"] == "/app/"
    assert apps["account"]["fragments"][0] == "general"


# ─────────────────────────────────────────────────────────────────────────────
# Anonymous visitors
# ─────────────────────────────────────────────────────────────────────────────

def test_anonymous_account_page_redirects_to_login(client):
    response = client.get("/account/?panel=billing", follow_redirects=False)
    assert response.status_code == 302
    assert response.headers["location"].startswith(login_url())
    assert _redirect_target(response).endswith("/account/?panel=billing")


def test_anonymous_home_redirects_to_login(client):
    response = client.get("/app/", follow_redirects=False)
    assert response.status_code == 302
    assert _redirect_target(response).endswith("/app/")


def test_anonymous_fragments_are_unauthorized(client):
    assert client.get("/account/panels/general").status_code == 401
    assert client.get("/app/widgets/pillars").status_code == 401


def test_tampered_session_is_anonymous(client):
    client.cookies.set(settings.session_cookie, "e30.deadbeef")
    response = client.get("/app/", follow_redirects=False)
    assert response.status_code == 302


# ─────────────────────────────────────────────────────────────────────────────
# Account page
# ─────────────────────────────────────────────────────────────────────────────

def test_account_page_defaults_to_general(signed_in):
    response = signed_in.get("/account/")
    assert response.status_code == 200
    html = response.text
    assert 'id="general"' in html
    assert 'id="billing"' not in html
    assert re.search(r'class="gfy-settings-link active"\s+role="tab"\s+aria-selected="true"', html)
    assert 'class="app-nav"' in html
    assert 'id="authModal"' not in html


def test_account_page_selects_panel(signed_in, store, viewer):
    store.set(viewer.id, BILLING_META_KEY, {"membership_name": "Velocity"})
    html = signed_in.get("/account/?panel=Billing").text
    assert 'id="billing"' in html
    assert "Velocity" in html


def test_unknown_panel_falls_back_to_general(signed_in):
    html = signed_in.get("/account/?panel=usage-report").text
    assert 'id="general"' in html


def test_account_page_shows_onboarding_progress(signed_in, store, viewer):
    store.set(viewer.id, ONBOARDING_PROGRESS_KEY, "65")
    html = signed_in.get("/account/").text
    assert 'data-progress="65"' in html


def test_panel_fragment(signed_in):
    response = signed_in.get("/account/panels/notifications")
    assert response.status_code == 200
    assert response.text.startswith('<div id="notifications"')
    assert "<html" not in response.text


def test_unknown_panel_fragment_is_404(signed_in):
    assert signed_in.get("/account/panels/usage-report").status_code == 404


def test_credits_panel_uses_injected_collaborators(signed_in, credit_repository, tier_resolver):
    credit_repository.balance = {"monthly_allowance": 1000, "allowance": 100}
    tier_resolver.tier = {"tier": "velocity"}

    html = signed_in.get("/account/panels/credits").text
    assert "gfy-badge--tier-velocity" in html
    assert 'data-level="danger"' not in html
    assert 'data-level="warning"' in html


def test_credits_panel_survives_failing_repository(signed_in, credit_repository):
    credit_repository.error = RuntimeError("boom")
    response = signed_in.get("/account/panels/credits")
    assert response.status_code == 200
    assert 'id="gauge-total">0<' in response.text


# ─────────────────────────────────────────────────────────────────────────────
# Home page
# ─────────────────────────────────────────────────────────────────────────────

def test_home_page(signed_in, store, viewer):
    store.set(viewer.id, DASHBOARD_META_KEY, {"tasks_due": 1, "stats": {"pitches": 9}})
    store.set(viewer.id, GOAL_META_KEY, "launch_promote")

    html = signed_in.get("/app/").text
    assert "Welcome back, Ada" in html
    assert "1 Task Due" in html
    assert 'data-goal="launch_promote"' in html
    assert 'class="gfy-home__goal-btn active" data-goal="launch_promote"' in html
    assert "Get Started" in html
    assert "gfy-authority__score" not in html
    assert "gfy-outcomes-grid" not in html
    assert '"currentGoal": "launch_promote"' in html
    assert '"userId": 7' in html


def test_home_widget_fragment(signed_in):
    response = signed_in.get("/app/widgets/outcomes")
    assert response.status_code == 200
    assert 'id="card-revenue" class="gfy-outcome-card card-capture highlight"' in response.text


def test_unknown_widget_is_404(signed_in):
    assert signed_in.get("/app/widgets/revenue-forecast").status_code == 404


def test_pipeline_and_attribution_fragments(signed_in, store, viewer):
    store.set(viewer.id, DASHBOARD_META_KEY, {"pipeline": {"shows_found": 42}})
    assert '<div class="gfy-pipe-val">42</div>' in signed_in.get("/app/widgets/pipeline").text
    assert "No Attribution Data Yet" in signed_in.get("/app/widgets/attribution").text


# ─────────────────────────────────────────────────────────────────────────────
# Auth modal partial
# ─────────────────────────────────────────────────────────────────────────────

def test_auth_modal_partial_for_anonymous_visitor(client):
    response = client.get("/partials/auth-modal", params={"redirect": "/tools/pitch/?topic=growth&step=2"})
    assert response.status_code == 200
    assert 'id="authModal"' in response.text
    redirect = home_url("/tools/pitch/?topic=growth&step=2")
    assert f'name="redirect_to" value="{escape(redirect)}"' in response.text


def test_auth_modal_partial_rejects_offsite_redirect(client):
    html = client.get("/partials/auth-modal", params={"redirect": "https://evil.test/"}).text
    assert f'name="redirect_to" value="{home_url("/app/")}"' in html


def test_auth_modal_partial_is_empty_when_signed_in(signed_in):
    response = signed_in.get("/partials/auth-modal", params={"redirect": "/app/"})
    assert response.status_code == 200
    assert response.text == ""


def test_page_shell_keeps_query_in_modal_redirect(store):
    html = render_page(None, store, "/account/", "<p>content</p>", request_uri="/account/?panel=billing&tab=2")
    assert f'value="{escape(home_url("/account/?panel=billing&tab=2"))}"' in html
