"""
Fixtures for the Maya browser checks.

The suite talks to a live Maya deployment and is skipped unless
MAYA_BASE_URL is set.
"""
import pytest
from pydantic_settings import BaseSettings, SettingsConfigDict

from .maya_devir_page import MayaDevirPage


class MayaSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MAYA_", env_file=".env", extra="ignore")

    BASE_URL: str = ""
    USERNAME: str = "test_user"
    PASSWORD: str = "test_password"
    HEADLESS: bool = True
    TIMEOUT: int = 30000  # ms


maya_settings = MayaSettings()


def pytest_collection_modifyitems(config, items):
    if maya_settings.BASE_URL:
        return
    skip = pytest.mark.skip(reason="MAYA_BASE_URL not set")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


@pytest.fixture
async def devir_page():
    page = MayaDevirPage(maya_settings.BASE_URL, timeout_ms=maya_settings.TIMEOUT)
    await page.start(headless=maya_settings.HEADLESS)
    try:
        await page.login(maya_settings.USERNAME, maya_settings.PASSWORD)
        await page.open_devir_page()
        yield page
    finally:
        await page.stop()
