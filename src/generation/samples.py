"""
Built-in exercises for offline practice.

Stored in the same wire shape the generator returns, so they pass through
parse_exercise() like any live response.
"""

from __future__ import annotations

from src.reading.models import Exercise

from .exercise_provider import StaticExerciseProvider, parse_exercise

_URBAN_BEEKEEPING = {
    "passage": {
        "title": "The Rise of Urban Beekeeping",
        "paragraphs": [
            "Over the past two decades, beehives have appeared on the rooftops of hotels, "
            "office towers and apartment blocks in cities from London to Tokyo. What began as "
            "a hobby for a handful of enthusiasts has become a recognised feature of "
            "metropolitan environmental policy, with several municipal governments now "
            "issuing guidance on hive placement and registration.",
            "Advocates argue that cities can offer bees a surprisingly rich diet. Parks, "
            "private gardens, railway embankments and street trees flower in succession from "
            "early spring to late autumn, and because urban areas are rarely sprayed with "
            "agricultural pesticides, foraging bees may encounter fewer toxic residues than "
            "their rural counterparts.",
            "A 2016 survey of honey samples collected across Paris supported part of this "
            "claim. Researchers identified pollen from more than 280 plant species in the "
            "city's honey, compared with fewer than 50 in samples taken from intensively "
            "farmed regions nearby, where fields of a single crop dominate the landscape.",
            "However, ecologists have begun to question whether the boom is as beneficial as "
            "it appears. Honeybees are only one of several hundred bee species in most "
            "temperate countries, and they compete with wild bees for the same nectar and "
            "pollen. In densely hived districts, the competition may be severe.",
            "Evidence for this concern emerged from a study in which researchers counted wild "
            "pollinators at sites with different numbers of nearby hives. Where hive density "
            "exceeded roughly ten colonies per square kilometre, visits by wild bees to "
            "flowers fell by almost half, suggesting that managed colonies were displacing "
            "native species.",
            "Disease transmission is a further worry. Managed colonies can carry viruses and "
            "parasites that spread to wild populations through shared flowers. Because urban "
            "hives are often kept by inexperienced owners, infections may go undetected for "
            "longer than they would in professionally managed apiaries.",
            "In response, some cities have shifted their focus from hives to habitat. Rather "
            "than encouraging residents to keep bees, planners now fund wildflower verges, "
            "green roofs planted with native species and nesting sites for solitary bees, "
            "measures that benefit a broad range of pollinators.",
            "Supporters of urban beekeeping accept that regulation is needed but maintain "
            "that hives have educational value. Schoolchildren who visit a rooftop apiary, "
            "they argue, gain an understanding of pollination that no textbook can provide, "
            "and that understanding may translate into lasting support for conservation.",
        ],
    },
    "question": {
        "type": "True/False/Not Given",
        "questionText": "High numbers of managed hives can reduce how often wild bees visit flowers.",
        "correctParagraphIndices": [4],
        "explanation": "Paragraph E reports that above about ten colonies per square kilometre, "
        "wild bee visits to flowers fell by almost half. 'Visits ... fell' matches 'reduce how "
        "often wild bees visit', so the statement is True.",
        "answer": "True",
    },
}

_DEEP_SEA_MINING = {
    "passage": {
        "title": "Mining the Ocean Floor",
        "paragraphs": [
            "Scattered across the abyssal plains of the Pacific lie billions of potato-sized "
            "lumps known as polymetallic nodules. Formed over millions of years as metals "
            "precipitate from seawater around a small core, they contain manganese, nickel, "
            "cobalt and copper, all of which are in growing demand for battery production.",
            "Commercial interest in these deposits is not new. In the 1970s several consortia "
            "tested collection machinery in the Clarion-Clipperton Zone, but falling metal "
            "prices and legal uncertainty caused the projects to be abandoned before "
            "extraction began.",
            "Today the regulatory picture is clearer. The International Seabed Authority, "
            "established under the UN Convention on the Law of the Sea, issues exploration "
            "contracts for areas beyond national jurisdiction and is negotiating a code that "
            "would govern full-scale exploitation.",
            "Scientists warn that the ecological cost could be high. The nodules themselves "
            "provide the only hard surface on which many deep-sea organisms can attach, and "
            "sediment plumes stirred up by collector vehicles may smother filter-feeding "
            "animals kilometres away from the mining site.",
            "Recovery, if it happens at all, is likely to be extremely slow. When researchers "
            "revisited a test site ploughed in 1989, they found that many animal groups had "
            "still not returned to their original numbers more than twenty-six years later.",
            "Mining companies counter that land-based extraction carries its own heavy costs, "
            "including deforestation, toxic waste and, in some regions, serious human rights "
            "abuses. They present the seabed as a source of metals with a smaller overall "
            "footprint.",
        ],
    },
    "question": {
        "type": "Matching Information",
        "questionText": "Which paragraph mentions evidence that damaged seabed communities had not "
        "recovered after more than two decades?",
        "correctParagraphIndices": [4],
        "explanation": "Paragraph E describes a site ploughed in 1989 where animal groups had not "
        "returned to original numbers over twenty-six years later, i.e. after more than two "
        "decades.",
        "answer": "E",
    },
}

_COGNITIVE_RESERVE = {
    "passage": {
        "title": "Bilingualism and the Ageing Brain",
        "paragraphs": [
            "For much of the twentieth century, raising children with two languages was "
            "thought to cause confusion and delay. That view has largely been reversed, and "
            "attention has turned to possible advantages of bilingualism later in life.",
            "One widely cited study examined the medical records of patients attending a "
            "memory clinic in Toronto. Those who had spoken two languages throughout their "
            "lives showed the first symptoms of dementia about four years later, on average, "
            "than those who spoke only one.",
            "The leading explanation is known as cognitive reserve. Constantly selecting one "
            "language while suppressing another is thought to exercise executive control "
            "networks, allowing the brain to compensate for damage for longer.",
            "Not every study agrees. Large population surveys in several countries have "
            "found no difference in the age of diagnosis, and critics point out that "
            "immigrant bilinguals may differ from monolinguals in education, diet and "
            "occupation, any of which could influence cognitive health.",
            "Brain imaging has added a new dimension to the debate. Scans of older bilingual "
            "adults sometimes reveal more physical damage than in monolinguals with similar "
            "test scores, which suggests that bilinguals maintain their performance despite "
            "greater underlying disease rather than having less disease.",
        ],
    },
    "question": {
        "type": "Gap Filling",
        "questionText": "Lifelong bilinguals in a Toronto memory clinic developed dementia "
        "symptoms around ________ later than monolingual patients.",
        "correctParagraphIndices": [1],
        "explanation": "Paragraph B states the first symptoms appeared 'about four years later, "
        "on average' in patients who had spoken two languages throughout their lives.",
        "answer": "four years",
    },
}


def load_sample_exercises() -> list[Exercise]:
    """Validate and return the built-in exercises."""
    return [parse_exercise(raw) for raw in (_URBAN_BEEKEEPING, _DEEP_SEA_MINING, _COGNITIVE_RESERVE)]


def sample_provider() -> StaticExerciseProvider:
    """Offline provider over the built-in exercises."""
    return StaticExerciseProvider(load_sample_exercises())
