from __future__ import annotations

import pytest

_PROSE_PARAGRAPHS = [
    "The river town woke slowly that spring. Boats that had wintered on the "
    "mud flats were dragged back into the current, and the ferryman, who had "
    "not spoken to anyone since the first frost, began calling out the "
    "crossing times again as though nothing had happened.",
    "Nobody could say exactly when the mill had closed. Some said it was the "
    "year of the flood; others insisted it had been failing long before that, "
    "and that the flood had only given the owners an excuse. Either way, the "
    "great wheel had not turned in a decade, and children dared each other to "
    "touch it after dark!",
    "Was it true that the old road once ran all the way to the coast? The "
    "maps in the library suggested so, although the librarian warned that "
    "half of them had been drawn by a surveyor with a generous imagination, "
    "a weak grasp of distance, and a habit of naming hills after his cousins.",
    "In the market square, traders argued over the price of salt, wool, "
    "lamp oil and rope. The arguments were loud but rarely serious. By noon "
    "the deals were struck, the carts were loaded, and the square belonged to "
    "the pigeons until the following morning.",
    "A letter arrived for the schoolmaster in late April.\nIt was short.\n"
    "It asked whether the school would take three more pupils in the autumn, "
    "and it was signed with a name nobody in the town recognised.",
    "By summer the question of the letter had been forgotten, replaced by "
    "the more urgent matter of the bridge, which had begun to lean in a way "
    "that the engineers described as concerning and the townsfolk described "
    "in words that cannot be repeated here.",
]

PROSE_DOCUMENT = "\n\n".join(_PROSE_PARAGRAPHS * 4)

MARKDOWN_DOCUMENT = "\n\n".join(
    [
        "# Field notes",
        "These notes collect observations from the survey. Each section covers "
        "one site; measurements are in metres unless stated otherwise.",
        "## Site A: the north bank",
        "- Soil: dense clay, waterlogged below 0.4 m.\n"
        "- Vegetation: reeds, willow (mostly young), nettles.\n"
        "- Access: via the towpath; the gate is locked on Sundays.",
        "The bank has eroded noticeably since the last visit (see [the 2019 "
        "report](https://example.org/reports/2019)). Recommend re-surveying "
        "after the winter floods; the marker posts may not survive.",
        "## Site B: the mill race",
        "```\ndepth_m = [0.8, 1.1, 1.4, 1.2]\nflow = sum(depth_m) / len(depth_m)\n```",
        "Flow readings were taken at four points. The race is silting up: "
        "readings at the downstream end were lower than expected, and the "
        "sluice (which should be open) appears to be jammed half-shut.",
        "### Open questions",
        "1. Who owns the sluice?\n2. Is the race still used for drainage?\n"
        "3. Can the marker posts be replaced before autumn?",
    ]
    * 5
)


@pytest.fixture
def prose_document() -> str:
    return PROSE_DOCUMENT


@pytest.fixture
def markdown_document() -> str:
    return MARKDOWN_DOCUMENT


@pytest.fixture
def documents() -> dict[str, str]:
    return {"prose": PROSE_DOCUMENT, "markdown": MARKDOWN_DOCUMENT}
