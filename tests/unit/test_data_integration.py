"""Tests for DataIntegrationService."""

from unittest.mock import AsyncMock

import pytest

from injury_info.connectors.crm import CrmPort
from injury_info.data_models import Settlement
from injury_info.services import DataIntegrationService
from injury_info.services.data_integration import merge_settlements

CONTENT_SHEETS = {
    "Top_10_Cases": [
        ["ID", "Case Name", "Description", "Symptoms"],
        ["1", "Hernia Mesh Lawsuits", "Defective hernia mesh implants", "Pain; Fever"],
        ["2", "Zantac Lawsuits", "Zantac cancer claims", ""],
    ],
    "Case_Amounts": [
        ["Case Type", "Settlement_Amount_USD", "Source_Link"],
        ["Hernia Mesh Lawsuits", "1200000", "https://example.org/mesh"],
        ["Paraquat", "250000", ""],
    ],
    "Top_10_Firms": [
        ["ID", "Name", "Location", "Specialties"],
        ["1", "Mesh Law Group", "Houston, TX", "Hernia Mesh, Medical Devices"],
        ["2", "Farm Injury Lawyers", "Omaha, NE", "Paraquat"],
    ],
}


def _crm(firms: list | None = None, settlements: list | None = None) -> AsyncMock:
    crm = AsyncMock(spec=CrmPort)
    crm.search_diseases.return_value = []
    crm.find_law_firms.return_value = firms or []
    crm.get_settlement_data.return_value = settlements or []
    return crm


@pytest.fixture
def content_reader(reader_factory):
    return reader_factory(CONTENT_SHEETS)


class TestArticles:
    @pytest.mark.asyncio
    async def test_merges_sheets_and_dedupes_titles(
        self, content_reader, defaults, clock
    ) -> None:
        service = DataIntegrationService(content_reader, _crm(), defaults, clock=clock)

        articles = await service.get_all_articles()

        titles = [a.title for a in articles]
        # "Hernia Mesh Lawsuits" appears in both sheets and is kept once
        assert titles == ["Hernia Mesh Lawsuits", "Zantac Lawsuits", "Paraquat"]
        assert articles[0].content.symptoms == ("Pain", "Fever")
        assert articles[0].category == "legal"

    @pytest.mark.asyncio
    async def test_fallback_articles(self, reader_factory, defaults, clock) -> None:
        service = DataIntegrationService(reader_factory({}), None, defaults, clock=clock)

        articles = await service.get_all_articles()

        assert articles
        assert all(a.origin == "fallback" for a in articles)

    @pytest.mark.asyncio
    async def test_search_and_lookup_by_slug(
        self, content_reader, defaults, clock
    ) -> None:
        service = DataIntegrationService(content_reader, _crm(), defaults, clock=clock)

        found = await service.search_articles("zantac")
        assert [a.slug for a in found] == ["zantac-lawsuits"]
        assert (await service.get_article("zantac-lawsuits")) is not None
        assert (await service.get_article("missing")) is None

    @pytest.mark.asyncio
    async def test_articles_cached(self, content_reader, defaults, clock) -> None:
        service = DataIntegrationService(content_reader, _crm(), defaults, clock=clock)

        await service.get_all_articles()
        await service.get_all_articles()
        assert content_reader.read_sheet.await_count == 2  # one per sheet

        clock.advance(5 * 60)
        await service.get_all_articles()
        assert content_reader.read_sheet.await_count == 4


class TestLawFirms:
    @pytest.mark.asyncio
    async def test_filters_sheet_firms_and_adds_crm(
        self, content_reader, defaults, clock
    ) -> None:
        crm = _crm(firms=[{"id": "9", "name": "CRM Firm", "location": "Dallas, TX"}])
        service = DataIntegrationService(content_reader, crm, defaults, clock=clock)

        firms = await service.get_law_firms("hernia", "tx")

        assert [f.name for f in firms] == ["Mesh Law Group", "CRM Firm"]
        assert firms[1].id == "hubspot_firm_9"
        assert firms[1].origin == "hubspot"
        crm.find_law_firms.assert_awaited_once_with("hernia", "tx", 20)

    @pytest.mark.asyncio
    async def test_fallback_firms_filtered_by_specialty(
        self, defaults, clock
    ) -> None:
        service = DataIntegrationService(None, _crm(), defaults, clock=clock)

        firms = await service.get_law_firms("roundup")

        assert [f.name for f in firms] == ["National Injury Law Center"]

    @pytest.mark.asyncio
    async def test_crm_failure_is_ignored(self, content_reader, defaults, clock) -> None:
        crm = _crm()
        crm.find_law_firms.side_effect = RuntimeError("down")
        service = DataIntegrationService(content_reader, crm, defaults, clock=clock)

        firms = await service.get_law_firms("paraquat")
        assert [f.name for f in firms] == ["Farm Injury Lawyers"]


class TestSettlements:
    @pytest.mark.asyncio
    async def test_sheet_settlements_for_condition(
        self, content_reader, defaults, clock
    ) -> None:
        service = DataIntegrationService(content_reader, _crm(), defaults, clock=clock)

        settlements = await service.get_settlement_data("hernia mesh")

        assert len(settlements) == 1
        assert settlements[0].settlement_range == "$1.2 million"
        assert settlements[0].source_link == "https://example.org/mesh"

    @pytest.mark.asyncio
    async def test_reads_each_crm_operation(
        self, content_reader, defaults, clock
    ) -> None:
        crm = _crm()
        service = DataIntegrationService(content_reader, crm, defaults, clock=clock)

        await service.get_all_articles()
        await service.get_settlement_data("hernia mesh", "TX")

        crm.search_diseases.assert_awaited_once_with("", None, 100)
        crm.get_settlement_data.assert_awaited_once_with("hernia mesh", "TX")

    @pytest.mark.asyncio
    async def test_default_settlements(self, defaults, clock) -> None:
        service = DataIntegrationService(None, None, defaults, clock=clock)

        (meso,) = await service.get_settlement_data("Mesothelioma")
        assert meso.average_settlement == "$1.8 million"

        (generic,) = await service.get_settlement_data("Benzene")
        assert generic.condition == "Benzene"
        assert generic.settlement_range == "Varies by case"

        (unknown,) = await service.get_settlement_data(None)
        assert unknown.condition == "Unknown"

    def test_merge_prefers_concrete_range(self) -> None:
        vague = Settlement(condition="Paraquat")
        concrete = Settlement(condition="Paraquat", settlement_range="$250K")
        other_state = Settlement(condition="Paraquat", state="CA")

        merged = merge_settlements([vague, concrete, other_state])

        assert merged == [concrete, other_state]


class TestSearchCondition:
    @pytest.mark.asyncio
    async def test_combines_everything(self, content_reader, defaults, clock) -> None:
        service = DataIntegrationService(content_reader, _crm(), defaults, clock=clock)

        result = await service.search_condition("Paraquat")

        assert [a.title for a in result.articles] == ["Paraquat"]
        assert [f.name for f in result.law_firms] == ["Farm Injury Lawyers"]
        assert result.settlements[0].settlement_range == "$250K"
        assert result.summary.startswith("Information about Paraquat")
        assert "Typical settlements range from $250K." in result.summary

    @pytest.mark.asyncio
    async def test_clear_cache(self, content_reader, defaults, clock) -> None:
        service = DataIntegrationService(content_reader, _crm(), defaults, clock=clock)

        await service.get_all_articles()
        service.clear_cache()
        await service.get_all_articles()

        assert content_reader.read_sheet.await_count == 4
