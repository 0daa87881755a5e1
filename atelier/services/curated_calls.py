"""Curated open call catalogue, modelled on NYFA listings."""

from atelier.schemas.open_call import OpenCall

CURATED_CALLS: tuple[OpenCall, ...] = (
    OpenCall(
        id="nyfa-001",
        title="Spring Group Exhibition",
        organization="Brooklyn Art Gallery",
        location="Brooklyn, NY",
        deadline="2025-02-15",
        entry_fee=35,
        description=(
            "Seeking emerging and mid-career artists for our annual spring group "
            "exhibition. All 2D mediums welcome."
        ),
        mediums=["Painting", "Drawing", "Photography", "Mixed Media"],
        theme="Renewal and Transformation",
        eligibility="Emerging and mid-career artists",
        prizes="Exhibition opportunity, $500 best in show",
        url="https://example.com/spring-exhibition",
        source="NYFA",
        featured=True,
        type="exhibition",
    ),
    OpenCall(
        id="nyfa-002",
        title="Artist Residency Program 2025",
        organization="Catskills Art Center",
        location="Catskills, NY",
        deadline="2025-03-01",
        entry_fee=0,
        description=(
            "Month-long summer residency for artists working in any medium. Housing "
            "and studio space provided."
        ),
        mediums=["All Mediums"],
        theme="Open theme",
        eligibility="All career stages",
        prizes="Housing, studio space, $1500 stipend",
        url="https://example.com/catskills-residency",
        source="NYFA",
        featured=True,
        type="residency",
    ),
    OpenCall(
        id="nyfa-003",
        title="Abstract Expressions Juried Show",
        organization="Manhattan Arts Collective",
        location="Manhattan, NY",
        deadline="2025-01-31",
        entry_fee=45,
        description="National juried exhibition celebrating abstract art in all forms.",
        mediums=["Painting", "Sculpture", "Mixed Media"],
        theme="Abstract, Non-representational",
        eligibility="Open to all US-based artists",
        prizes="$2000 first place, $1000 second place, exhibition",
        url="https://example.com/abstract-show",
        source="NYFA",
        featured=False,
        type="exhibition",
    ),
    OpenCall(
        id="nyfa-004",
        title="Emerging Photographers Grant",
        organization="Light & Lens Foundation",
        location="National",
        deadline="2025-02-28",
        entry_fee=25,
        description=(
            "Supporting emerging photographers with project grants and mentorship "
            "opportunities."
        ),
        mediums=["Photography", "Digital Photography", "Film Photography"],
        theme="Documentary, Fine Art, Conceptual",
        eligibility="Emerging artists with less than 5 years professional experience",
        prizes="$5000 grant, mentorship program, portfolio review",
        url="https://example.com/photo-grant",
        source="NYFA",
        featured=True,
        type="grant",
    ),
    OpenCall(
        id="nyfa-005",
        title="Sculpture in the Park",
        organization="Hudson Valley Arts Council",
        location="Hudson Valley, NY",
        deadline="2025-04-15",
        entry_fee=50,
        description=(
            "Outdoor sculpture exhibition in scenic Hudson Valley park. Works must "
            "withstand outdoor conditions."
        ),
        mediums=["Sculpture", "Installation", "Mixed Media"],
        theme="Nature and Environment",
        eligibility="Mid-career and established artists",
        prizes="Exhibition, $3000 acquisition prize, catalog inclusion",
        url="https://example.com/sculpture-park",
        source="NYFA",
        featured=False,
        type="exhibition",
    ),
    OpenCall(
        id="nyfa-006",
        title="Digital Arts Open Call",
        organization="New Media Gallery",
        location="Queens, NY",
        deadline="2025-02-01",
        entry_fee=0,
        description=(
            "Seeking innovative digital and new media works for upcoming exhibition "
            "exploring technology and art."
        ),
        mediums=["Digital Art", "Video", "Installation", "Interactive"],
        theme="Technology, AI, Virtual Reality",
        eligibility="All career stages",
        prizes="Exhibition, artist talk, $1000 honorarium",
        url="https://example.com/digital-arts",
        source="NYFA",
        featured=True,
        type="exhibition",
    ),
    OpenCall(
        id="nyfa-007",
        title="Community Mural Project",
        organization="Bronx Arts Initiative",
        location="Bronx, NY",
        deadline="2025-01-20",
        entry_fee=0,
        description=(
            "Seeking muralists for public art project celebrating community heritage "
            "and diversity."
        ),
        mediums=["Mural", "Painting", "Mixed Media"],
        theme="Community, Heritage, Diversity",
        eligibility="Local artists preferred, all levels welcome",
        prizes="$8000 commission, materials provided",
        url="https://example.com/bronx-mural",
        source="NYFA",
        featured=False,
        type="commission",
    ),
    OpenCall(
        id="nyfa-008",
        title="Women in Art Fellowship",
        organization="Foundation for Women Artists",
        location="National",
        deadline="2025-03-15",
        entry_fee=30,
        description=(
            "Supporting women-identifying artists with unrestricted fellowships for "
            "artistic development."
        ),
        mediums=["All Mediums"],
        theme="Open theme",
        eligibility="Women-identifying artists, mid-career",
        prizes="$10000 unrestricted fellowship",
        url="https://example.com/women-fellowship",
        source="NYFA",
        featured=True,
        type="fellowship",
    ),
)


def list_curated_calls() -> list[OpenCall]:
    return list(CURATED_CALLS)
