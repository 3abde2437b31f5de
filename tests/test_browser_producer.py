"""
Tests for the Playwright lifecycle owned by BrowserProducer, with Playwright
replaced by in-memory fakes.
"""

import pytest
from fake_useragent import FakeUserAgentError

from harvest.producers import browser
from harvest.producers.base import ProducerOptions
from harvest.producers.browser import FALLBACK_UA, LAUNCH_ARGS, BrowserProducer


class FakePage:
    pass


class FakeContext:
    def __init__(self, kwargs):
        self.kwargs = kwargs

    async def new_page(self):
        return FakePage()


class FakeBrowser:
    def __init__(self):
        self.contexts = []
        self.closed = False

    async def new_context(self, **kwargs):
        context = FakeContext(kwargs)
        self.contexts.append(context)
        return context

    async def close(self):
        self.closed = True


class FakeChromium:
    def __init__(self):
        self.launches = []
        self.browser = FakeBrowser()

    async def launch(self, **kwargs):
        self.launches.append(kwargs)
        return self.browser


class FakePlaywright:
    def __init__(self):
        self.chromium = FakeChromium()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False


@pytest.fixture
def playwright(monkeypatch):
    fake = FakePlaywright()
    monkeypatch.setattr(browser, "async_playwright", lambda: fake)
    monkeypatch.setattr(BrowserProducer, "user_agent", classmethod(lambda cls: "test-agent"))
    return fake


class CareersPage(BrowserProducer):
    name = "careers"

    async def collect(self, page):
        assert isinstance(page, FakePage)
        return [{"title": "Backend Engineer", "company": "Acme", "url": "a/1"}]


class BrokenPage(BrowserProducer):
    async def collect(self, page):
        raise TimeoutError("selector never appeared")


@pytest.mark.asyncio
async def test_collects_and_closes(playwright):
    jobs = await CareersPage()(ProducerOptions(headless=True))

    assert jobs == [{"title": "Backend Engineer", "company": "Acme", "url": "a/1"}]
    assert playwright.chromium.launches == [{"headless": True, "args": LAUNCH_ARGS}]
    context = playwright.chromium.browser.contexts[0]
    assert context.kwargs["user_agent"] == "test-agent"
    assert context.kwargs["viewport"] == browser.VIEWPORT
    assert playwright.chromium.browser.closed is True


@pytest.mark.asyncio
async def test_headful_uses_native_viewport(playwright):
    await CareersPage()(ProducerOptions(headless=False))

    assert playwright.chromium.launches[0]["headless"] is False
    assert playwright.chromium.browser.contexts[0].kwargs["viewport"] is None


@pytest.mark.asyncio
async def test_browser_closed_when_collect_fails(playwright):
    with pytest.raises(TimeoutError):
        await BrokenPage()(ProducerOptions())

    assert playwright.chromium.browser.closed is True


def test_name_defaults_to_class_name():
    assert BrokenPage().name == "BrokenPage"
    assert CareersPage().name == "careers"


class FakeAgents:
    random = "agent-from-data"


def test_user_agent_data_loaded_once(monkeypatch):
    built = []

    def make_agents(**kwargs):
        built.append(kwargs)
        return FakeAgents()

    monkeypatch.setattr(BrowserProducer, "_agents", None)
    monkeypatch.setattr(browser, "UserAgent", make_agents)

    assert CareersPage.user_agent() == "agent-from-data"
    assert BrokenPage.user_agent() == "agent-from-data"
    assert len(built) == 1
    assert built[0]["fallback"] == FALLBACK_UA


def test_user_agent_falls_back_when_data_unavailable(monkeypatch):
    def broken(**kwargs):
        raise FakeUserAgentError("no data")

    monkeypatch.setattr(BrowserProducer, "_agents", None)
    monkeypatch.setattr(browser, "UserAgent", broken)

    assert CareersPage.user_agent() == FALLBACK_UA
