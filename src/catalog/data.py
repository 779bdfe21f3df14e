"""
Built-in idea catalog and search suggestions.

Loaded once at session start and never mutated. Identifiers are assigned in
publication order, so their string order doubles as a recency proxy.
"""

from src.models.idea_item import IdeaItem, Category, Popularity, Difficulty


BUILTIN_IDEAS: tuple = (
    IdeaItem(
        id="idea-001",
        title="Global Climate Hack 2025",
        category=Category.HACKATHONS,
        description="48-hour sprint building tools for carbon accounting and climate resilience.",
        popularity=Popularity.HIGH,
        views=12400,
        tags=("Climate", "Sustainability", "Open Data"),
        theme="Climate Tech",
        organizer="Earth Builders Guild",
        deadline="2025-11-30",
    ),
    IdeaItem(
        id="idea-002",
        title="Quantum Error Correction for Beginners",
        category=Category.RESEARCH,
        description="A gentle walkthrough of surface codes and logical qubits.",
        popularity=Popularity.MEDIUM,
        views=8300,
        tags=("Quantum Computing", "Physics", "Tutorial"),
        domain="Quantum Information",
        abstract="Surveys stabilizer codes with worked examples on small lattices.",
    ),
    IdeaItem(
        id="idea-003",
        title="Open Source Satellite Tracker",
        category=Category.PROJECTS,
        description="Track amateur satellites with a Raspberry Pi and an SDR dongle.",
        popularity=Popularity.HIGH,
        views=5600,
        tags=("Hardware", "Space", "Open Source"),
        difficulty=Difficulty.INTERMEDIATE,
    ),
    IdeaItem(
        id="idea-004",
        title="Why Small Language Models Matter",
        category=Category.ARTICLES,
        description="The case for compact models on edge devices.",
        popularity=Popularity.HIGH,
        views=15200,
        tags=("Generative AI", "Edge Computing", "LLM"),
        author="Mira Sen",
        date="2025-06-12",
    ),
    IdeaItem(
        id="idea-005",
        title="Neural Interfaces Hackathon",
        category=Category.HACKATHONS,
        description="Prototype brain-computer interface applications with open EEG kits.",
        popularity=Popularity.MEDIUM,
        views=4100,
        tags=("Neurotech", "BCI", "Healthcare"),
        theme="Neurotechnology",
        organizer="NeuroOpen Collective",
        deadline="2025-12-15",
    ),
    IdeaItem(
        id="idea-006",
        title="Solar Microgrid Planner",
        category=Category.PROJECTS,
        description="Size batteries and panels for off-grid villages from weather data.",
        popularity=Popularity.LOW,
        views=2100,
        tags=("Energy", "Climate", "Optimization"),
        difficulty=Difficulty.ADVANCED,
    ),
    IdeaItem(
        id="idea-007",
        title="Protein Folding with Diffusion Models",
        category=Category.RESEARCH,
        description="Generative diffusion approaches to structure prediction.",
        popularity=Popularity.HIGH,
        views=9900,
        tags=("Bioinformatics", "Generative AI", "Deep Learning"),
        domain="Computational Biology",
        abstract="Compares score-based sampling against autoregressive baselines.",
    ),
    IdeaItem(
        id="idea-008",
        title="A Field Guide to Web3 Governance",
        category=Category.ARTICLES,
        description="What DAOs got right, and what they are still figuring out.",
        popularity=Popularity.LOW,
        views=3300,
        tags=("Web3", "Governance", "Blockchain"),
        author="Tomas Reyes",
        date="2025-03-02",
    ),
    IdeaItem(
        id="idea-009",
        title="Personal Knowledge Graph Builder",
        category=Category.PROJECTS,
        description="Turn your notes into a queryable graph with local embeddings.",
        popularity=Popularity.MEDIUM,
        views=7200,
        tags=("Productivity", "Knowledge Graph", "LLM"),
        difficulty=Difficulty.BEGINNER,
    ),
    IdeaItem(
        id="idea-010",
        title="Post-Quantum Cryptography Migration",
        category=Category.RESEARCH,
        description="Planning the move to lattice-based key exchange.",
        popularity=Popularity.MEDIUM,
        views=6100,
        tags=("Security", "Quantum Computing", "Cryptography"),
        domain="Security",
        abstract="A migration checklist grounded in recent standardization outcomes.",
    ),
    IdeaItem(
        id="idea-011",
        title="AI for Accessible Cities Challenge",
        category=Category.HACKATHONS,
        description="Map barriers and route around them with street-level imagery.",
        popularity=Popularity.LOW,
        views=1800,
        tags=("Urban Tech", "Computer Vision", "Accessibility"),
        theme="Smart Cities",
        organizer="CivicLab",
        deadline="2026-01-20",
    ),
    IdeaItem(
        id="idea-012",
        title="Saved: Robotics Starter Kit Notes",
        category=Category.SAVED,
        description="Your bookmarked notes on building a first robot arm.",
        popularity=Popularity.MEDIUM,
        views=950,
        tags=("Robotics", "Hardware"),
    ),
)


BUILTIN_SUGGESTIONS: tuple = (
    "Quantum Computing",
    "Generative AI",
    "Climate Tech Hackathons",
    "Open Source Hardware",
    "Neural Interfaces",
)
