# services/energy_engine/definitions.py
# Static definition of the Energy Alignment Quiz question catalog.
# Validated through loader.load_catalog_data before the engine uses it.

CATALOG_VERSION = "1.0.0"

# Sections are presented in list order; questions within a section likewise.
QUIZ_SECTIONS = [
    {
        "id": "about",
        "title": "About You",
        "subtitle": "Let's start with the basics",
        "icon": "🌸",
        "questions": [
            {
                "id": "name",
                "type": "text",
                "text": "What should we call you?",
                "placeholder": "Your first name",
                "is_name": True
            }
        ]
    },
    {
        "id": "body",
        "title": "Body Battery",
        "subtitle": "How much physical energy you have to draw on",
        "icon": "🔋",
        "questions": [
            {
                "id": "body-q1",
                "type": "likert",
                "text": "I wake up feeling genuinely rested.",
                "dimension": "BB",
                "weight": 1.0
            },
            {
                "id": "body-q2",
                "type": "likert",
                "text": "My energy stays steady through the afternoon without needing sugar or caffeine.",
                "dimension": "BB",
                "weight": 1.0
            },
            {
                "id": "body-q3",
                "type": "single",
                "text": "How would you describe your sleep on most nights?",
                "options": [
                    {"value": "deep", "label": "Deep and restorative", "weights": {"BB": 2.0}},
                    {"value": "light", "label": "Light, but I get enough hours", "weights": {"BB": 1.0}},
                    {"value": "broken", "label": "Broken, I wake up several times", "weights": {"BB": 0.5}},
                    {"value": "barely", "label": "I barely sleep", "weights": {}}
                ]
            }
        ]
    },
    {
        "id": "emotions",
        "title": "Emotional Landscape",
        "subtitle": "How much emotional weight you are carrying",
        "icon": "🌊",
        "questions": [
            {
                "id": "emotions-q1",
                "type": "likert",
                "text": "I can feel a difficult emotion without being swept away by it.",
                "dimension": "EO",
                "weight": 1.0,
                "keyed": "reverse"
            },
            {
                "id": "emotions-q2",
                "type": "likert",
                "text": "I rarely feel on the edge of tears or irritation.",
                "dimension": "EO",
                "weight": 1.0,
                "keyed": "reverse"
            },
            {
                "id": "emotions-q3",
                "type": "categorical",
                "text": "When someone asks how you are, you usually:",
                "options": [
                    {"value": "honest", "label": "Tell them honestly, even when it's hard", "weights": {"SS": 1.0}},
                    {"value": "fine", "label": "Say \"I'm fine\" and change the subject", "weights": {"EO": 1.0}},
                    {"value": "deflect", "label": "Turn the conversation back to them", "weights": {"EO": 1.5}},
                    {"value": "overwhelmed", "label": "Feel a lump in your throat before answering", "weights": {"EO": 2.0}}
                ]
            }
        ]
    },
    {
        "id": "mind",
        "title": "Mind & Thoughts",
        "subtitle": "How busy and looping your thinking feels",
        "icon": "🧠",
        "questions": [
            {
                "id": "mind-q1",
                "type": "likert",
                "text": "My mind quiets down easily when I lie down at night.",
                "dimension": "RO",
                "weight": 1.0,
                "keyed": "reverse"
            },
            {
                "id": "mind-q2",
                "type": "likert",
                "text": "Once I make a decision, I don't replay it for days.",
                "dimension": "RO",
                "weight": 1.0,
                "keyed": "reverse"
            },
            {
                "id": "mind-q3",
                "type": "single",
                "text": "Which best describes your thoughts on a typical day?",
                "options": [
                    {"value": "clear", "label": "Mostly clear and focused", "weights": {}},
                    {"value": "busy", "label": "Busy, but manageable", "weights": {"RO": 1.0}},
                    {"value": "looping", "label": "Looping on worries and what-ifs", "weights": {"RO": 2.0}}
                ]
            }
        ]
    },
    {
        "id": "spirit",
        "title": "Spirit & Meaning",
        "subtitle": "Your sense of connection and purpose",
        "icon": "✨",
        "questions": [
            {
                "id": "spirit-q1",
                "type": "likert",
                "text": "I feel connected to something larger than my daily to-do list.",
                "dimension": "SP",
                "weight": 1.0
            },
            {
                "id": "spirit-q2",
                "type": "likert",
                "text": "I regularly make time for things that feel meaningful to me.",
                "dimension": "SP",
                "weight": 1.0
            },
            {
                "id": "spirit-q3",
                "type": "single",
                "text": "How often do you experience moments of stillness or quiet joy?",
                "options": [
                    {"value": "daily", "label": "Most days", "weights": {"SP": 2.0}},
                    {"value": "weekly", "label": "A few times a week", "weights": {"SP": 1.5}},
                    {"value": "rarely", "label": "Rarely", "weights": {"SP": 0.5}},
                    {"value": "never", "label": "I can't remember the last time", "weights": {}}
                ]
            }
        ]
    },
    {
        "id": "support",
        "title": "Support System",
        "subtitle": "How well you are held by the people around you",
        "icon": "🤝",
        "questions": [
            {
                "id": "support-q1",
                "type": "likert",
                "text": "I have people I can call when things get hard.",
                "dimension": "SS",
                "weight": 1.0
            },
            {
                "id": "support-q2",
                "type": "likert",
                "text": "I can accept help without feeling guilty or indebted.",
                "dimension": "SS",
                "weight": 1.0
            },
            {
                "id": "support-q3",
                "type": "categorical",
                "text": "When you are running on empty, what usually happens?",
                "options": [
                    {"value": "ask-for-help", "label": "I ask for help and let myself rest", "weights": {"SS": 2.0, "SP": 0.5, "BB": 0.5}},
                    {"value": "rest-alone", "label": "I withdraw and recharge on my own", "weights": {"SS": 1.0, "BB": 0.5}},
                    {"value": "keep-going", "label": "I push through and keep going", "weights": {"EO": 1.0, "RO": 0.5}},
                    {"value": "give-more", "label": "I end up giving even more to others", "weights": {"EO": 1.5, "RO": 1.0}}
                ]
            }
        ]
    }
]

QUIZ_CATALOG = {
    "version": CATALOG_VERSION,
    "sections": QUIZ_SECTIONS,
}
