"""Built-in data served when the spreadsheet and CRM are unavailable."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Protocol

from injury_info.data_models import (
    Article,
    ArticleContent,
    CaseDefinition,
    LawFirm,
    Settlement,
    SourceRecord,
)


class DefaultDataProvider(Protocol):
    """Port for default records used when live data cannot be loaded."""

    def sources(self) -> list[SourceRecord]:
        ...

    def cases(self) -> list[CaseDefinition]:
        ...

    def articles(self) -> list[Article]:
        ...

    def law_firms(self) -> list[LawFirm]:
        ...

    def settlements(self, condition: str | None) -> list[Settlement]:
        ...


FALLBACK_SOURCES: tuple[SourceRecord, ...] = (
    SourceRecord(
        id="fallback_source_1",
        disease_or_category="Mesothelioma",
        title="Malignant Mesothelioma - National Cancer Institute",
        url="https://www.cancer.gov/types/mesothelioma",
        source_type="Government",
        priority=1,
        keywords=("mesothelioma", "asbestos", "pleural mesothelioma"),
        description="Treatment, causes and research on mesothelioma.",
        origin="fallback",
    ),
    SourceRecord(
        id="fallback_source_2",
        disease_or_category="Asbestos",
        title="Learn About Asbestos - US EPA",
        url="https://www.epa.gov/asbestos/learn-about-asbestos",
        source_type="Government",
        priority=2,
        keywords=("asbestos", "asbestos exposure"),
        description="Health effects of asbestos exposure and where it is found.",
        origin="fallback",
    ),
    SourceRecord(
        id="fallback_source_3",
        disease_or_category="Talcum Powder",
        title="Talcum Powder and Cancer - American Cancer Society",
        url="https://www.cancer.org/cancer/risk-prevention/chemicals/talcum-powder-and-cancer.html",
        source_type="Medical",
        priority=1,
        keywords=("talc", "talcum powder", "baby powder", "ovarian cancer"),
        description="What research says about talc use and ovarian cancer risk.",
        origin="fallback",
    ),
    SourceRecord(
        id="fallback_source_4",
        disease_or_category="Roundup",
        title="Glyphosate - US EPA",
        url="https://www.epa.gov/ingredients-used-pesticide-products/glyphosate",
        source_type="Government",
        priority=2,
        keywords=("roundup", "glyphosate", "herbicide", "weed killer"),
        description="Regulatory review of glyphosate, the herbicide in Roundup.",
        origin="fallback",
    ),
    SourceRecord(
        id="fallback_source_5",
        disease_or_category="Non-Hodgkin Lymphoma",
        title="Lymphoma - National Cancer Institute",
        url="https://www.cancer.gov/types/lymphoma",
        source_type="Medical",
        priority=1,
        keywords=("lymphoma", "non-hodgkin lymphoma"),
        description="Types, treatment and research on lymphoma.",
        origin="fallback",
    ),
    SourceRecord(
        id="fallback_source_6",
        disease_or_category="PFAS",
        title="Per- and Polyfluoroalkyl Substances (PFAS) - US EPA",
        url="https://www.epa.gov/pfas",
        source_type="Government",
        priority=2,
        keywords=("pfas", "forever chemicals", "pfoa", "pfos"),
        description="PFAS health risks and drinking water contamination.",
        origin="fallback",
    ),
)


FALLBACK_CASES: tuple[CaseDefinition, ...] = (
    CaseDefinition(
        case_type="mesothelioma",
        name="Mesothelioma",
        description="Mesothelioma and asbestos exposure cases",
        keywords=("mesothelioma", "asbestos", "asbestos exposure", "pleural mesothelioma"),
        active=True,
        origin="fallback",
    ),
    CaseDefinition(
        case_type="talcum-powder",
        name="Talcum Powder",
        description="Talcum powder ovarian cancer cases",
        keywords=(
            "talcum powder",
            "talc",
            "baby powder",
            "ovarian cancer",
            "johnson & johnson",
        ),
        active=True,
        origin="fallback",
    ),
    CaseDefinition(
        case_type="pfas",
        name="PFAS/Forever Chemicals",
        description="PFAS and forever chemicals in water contamination cases",
        keywords=(
            "pfas",
            "forever chemicals",
            "water contamination",
            "pfoa",
            "pfos",
            "perfluoroalkyl",
        ),
        # Only activate once referrals for these cases are actually handled.
        active=False,
        origin="fallback",
    ),
)


FALLBACK_ARTICLES: tuple[tuple[str, str, str, str, ArticleContent], ...] = (
    (
        "Mesothelioma and Asbestos Exposure",
        "Comprehensive guide to mesothelioma, its causes, symptoms, and legal "
        "options for victims of asbestos exposure.",
        "mesothelioma-asbestos-exposure",
        "medical",
        ArticleContent(
            overview=(
                "Mesothelioma is a rare and aggressive cancer that develops in the "
                "lining of the lungs, abdomen, or heart. It is primarily caused by "
                "exposure to asbestos."
            ),
            symptoms=(
                "Chest pain and shortness of breath",
                "Persistent cough and fatigue",
                "Fluid buildup around the lungs",
            ),
            causes=(
                "Asbestos exposure in the workplace",
                "Secondary exposure through family members",
            ),
            treatments=("Surgery to remove tumors", "Chemotherapy and radiation therapy"),
            legal_options=(
                "Personal injury lawsuits against asbestos manufacturers",
                "Asbestos trust fund claims",
                "Wrongful death lawsuits for family members",
            ),
            settlements=(
                "Mesothelioma settlements typically range from $1.2 million to "
                "$2.4 million."
            ),
        ),
    ),
    (
        "Roundup Weedkiller Cancer Lawsuits",
        "Information about Roundup lawsuits alleging the weedkiller causes "
        "non-Hodgkin lymphoma and other cancers.",
        "roundup-weedkiller-cancer-lawsuits",
        "legal",
        ArticleContent(
            overview=(
                "Roundup is a weedkiller manufactured by Monsanto, now owned by "
                "Bayer. Its active ingredient, glyphosate, has been linked to "
                "non-Hodgkin lymphoma in numerous lawsuits."
            ),
            symptoms=(
                "Swollen lymph nodes in neck, armpits, or groin",
                "Night sweats and fever",
            ),
            causes=(
                "Direct exposure to Roundup during application",
                "Occupational exposure in agriculture and landscaping",
            ),
            treatments=("Chemotherapy and radiation therapy", "Stem cell transplantation"),
            legal_options=(
                "Product liability lawsuits against Bayer/Monsanto",
                "Settlement fund claims",
            ),
            settlements=(
                "Individual Roundup settlements typically range from $5,000 to "
                "$250,000."
            ),
        ),
    ),
    (
        "3M Combat Arms Earplug Litigation",
        "Details about the 3M earplug lawsuits alleging defective military "
        "earplugs caused hearing loss and tinnitus.",
        "3m-combat-arms-earplug-litigation",
        "legal",
        ArticleContent(
            overview=(
                "3M Combat Arms earplugs were issued to military personnel between "
                "2003 and 2015. Veterans allege the earplugs failed to protect "
                "their hearing."
            ),
            symptoms=("Hearing loss in one or both ears", "Ringing in the ears (tinnitus)"),
            causes=("Defective design of the earplugs",),
            treatments=("Hearing aids and cochlear implants", "Tinnitus management therapy"),
            legal_options=("Product liability lawsuits against 3M", "Settlement fund claims"),
            settlements="Individual earplug settlements average around $24,000.",
        ),
    ),
    (
        "Talcum Powder Ovarian Cancer Lawsuits",
        "Information about talcum powder lawsuits alleging the product causes "
        "ovarian cancer in women.",
        "talcum-powder-ovarian-cancer-lawsuits",
        "legal",
        ArticleContent(
            overview=(
                "Talcum powder lawsuits allege that talc-based products contain "
                "asbestos and cause ovarian cancer in women who used them."
            ),
            symptoms=("Abdominal bloating and pain", "Pelvic pain and pressure"),
            causes=(
                "Long-term use of talcum powder for feminine hygiene",
                "Asbestos contamination in talc products",
            ),
            treatments=("Surgery", "Chemotherapy and radiation therapy"),
            legal_options=(
                "Product liability lawsuits against Johnson & Johnson",
                "Wrongful death claims",
            ),
            settlements=(
                "Individual talcum powder settlements have ranged from $100,000 "
                "to $100 million."
            ),
        ),
    ),
    (
        "Paraquat Parkinson's Disease Lawsuits",
        "Information about Paraquat lawsuits alleging the herbicide causes "
        "Parkinson's disease in agricultural workers.",
        "paraquat-parkinsons-disease-lawsuits",
        "legal",
        ArticleContent(
            overview=(
                "Paraquat is a highly toxic herbicide. Studies have linked "
                "Paraquat exposure to an increased risk of Parkinson's disease."
            ),
            symptoms=("Tremors in hands, arms, legs, or jaw", "Slowed movement and stiffness"),
            causes=("Direct exposure during application", "Inhalation of Paraquat spray"),
            treatments=("Medications to manage symptoms", "Deep brain stimulation"),
            legal_options=(
                "Product liability lawsuits against manufacturers",
                "Wrongful death claims",
            ),
            settlements=(
                "Paraquat settlements are expected to range from $100,000 to "
                "$1 million or more."
            ),
        ),
    ),
)


FALLBACK_LAW_FIRMS: tuple[LawFirm, ...] = (
    LawFirm(
        id="fallback_firm_1",
        name="Saddle Rock Legal Group",
        location="Nationwide",
        phone="(800) 123-4567",
        website="https://legalinjuryadvocates.com",
        specialties=("Mesothelioma", "Asbestos", "Product Liability"),
        experience="20+ years",
        success_rate="95%",
        notable_settlements=("$2.4M mesothelioma settlement", "$1.8M asbestos case"),
        origin="fallback",
    ),
    LawFirm(
        id="fallback_firm_2",
        name="National Injury Law Center",
        location="California, Texas, Florida",
        phone="(800) 987-6543",
        website="https://nationalinjury.com",
        specialties=("Roundup", "Talcum Powder", "Medical Devices"),
        experience="15+ years",
        success_rate="90%",
        notable_settlements=("$250K Roundup settlement", "$500K talc case"),
        origin="fallback",
    ),
    LawFirm(
        id="fallback_firm_3",
        name="Veterans Legal Services",
        location="Nationwide",
        phone="(800) 555-0123",
        website="https://veteranslegal.org",
        specialties=("3M Earplugs", "Military Injuries", "VA Benefits"),
        experience="25+ years",
        success_rate="88%",
        notable_settlements=("$100K earplug case", "$75K tinnitus claim"),
        origin="fallback",
    ),
)


DEFAULT_SETTLEMENTS: dict[str, Settlement] = {
    "mesothelioma": Settlement(
        condition="Mesothelioma",
        settlement_range="$1.2 million to $2.4 million",
        average_settlement="$1.8 million",
        total_cases="Thousands",
        origin="fallback",
    ),
    "lung cancer": Settlement(
        condition="Lung Cancer",
        settlement_range="$500,000 to $1.5 million",
        average_settlement="$1 million",
        total_cases="Hundreds",
        origin="fallback",
    ),
    "ovarian cancer": Settlement(
        condition="Ovarian Cancer",
        settlement_range="$100,000 to $500,000",
        average_settlement="$300,000",
        total_cases="Thousands",
        origin="fallback",
    ),
    "non-hodgkin lymphoma": Settlement(
        condition="Non-Hodgkin Lymphoma",
        settlement_range="$50,000 to $250,000",
        average_settlement="$150,000",
        total_cases="Hundreds",
        origin="fallback",
    ),
}


class StaticDefaultData(DefaultDataProvider):
    """Default records compiled into the package."""

    def sources(self) -> list[SourceRecord]:
        return list(FALLBACK_SOURCES)

    def cases(self) -> list[CaseDefinition]:
        now = datetime.now(UTC).isoformat()
        return [case.model_copy(update={"last_updated": now}) for case in FALLBACK_CASES]

    def articles(self) -> list[Article]:
        now = datetime.now(UTC).isoformat()
        return [
            Article(
                id=f"fallback_article_{number}",
                title=title,
                description=description,
                slug=slug,
                category=category,
                date=now,
                content=content,
                origin="fallback",
            )
            for number, (title, description, slug, category, content) in enumerate(
                FALLBACK_ARTICLES, start=1
            )
        ]

    def law_firms(self) -> list[LawFirm]:
        return list(FALLBACK_LAW_FIRMS)

    def settlements(self, condition: str | None) -> list[Settlement]:
        if not condition:
            return [Settlement(condition="Unknown", origin="fallback")]
        default = DEFAULT_SETTLEMENTS.get(condition.lower())
        if default is None:
            return [Settlement(condition=condition, origin="fallback")]
        return [default]
