"""
Demo data seeding.
"""
import logging
from datetime import timedelta
from typing import Dict, List

from sqlalchemy.orm import Session

from bacprep import models
from bacprep.db.base import utcnow

logger = logging.getLogger(__name__)

DEMO_USERNAME = "andrei"
DEMO_PASSWORD = "password"

SUBJECTS = [
    {
        "name": "Romanian",
        "description": "Romanian Language and Literature",
        "total_topics": 18,
        "icon": "ri-book-open-line",
    },
    {
        "name": "Mathematics",
        "description": "Algebra, Geometry, and Calculus",
        "total_topics": 14,
        "icon": "ri-calculator-line",
    },
    {
        "name": "English",
        "description": "Grammar, Vocabulary, and Comprehension",
        "total_topics": 16,
        "icon": "ri-translate-2",
    },
    {
        "name": "Biology",
        "description": "Cell Structure, Human Anatomy, and Ecology",
        "total_topics": 17,
        "icon": "ri-microscope-line",
    },
]

# subject key -> [(name, description, difficulty, html content)]; order follows list position
TOPICS = {
    "Romanian": [
        (
            "Introduction to Romanian Literature",
            "Overview of Romanian literary periods and major authors",
            "easy",
            "<p>Romanian literature developed later than many other European national literatures, "
            "with the first books in Romanian printed in the 1640s, on top of a rich oral tradition.</p>"
            "<ul><li><b>Medieval Period</b> (16th-18th centuries): religious texts and chronicles</li>"
            "<li><b>Romantic Period</b> (19th century): Mihai Eminescu, Vasile Alecsandri</li>"
            "<li><b>Interwar Period</b>: Liviu Rebreanu, Mihail Sadoveanu</li>"
            "<li><b>Contemporary Period</b>: post-WWII to present</li></ul>",
        ),
        (
            "Romanian Grammar - Noun Cases",
            "Understanding the case system in Romanian language",
            "medium",
            "<p>Romanian has five cases: Nominative, Accusative, Genitive, Dative and Vocative.</p>"
            "<ul><li><b>Nominativ</b>: <i>Cartea este pe masă.</i></li>"
            "<li><b>Acuzativ</b>: <i>Citesc cartea.</i></li>"
            "<li><b>Genitiv</b>: <i>Pagina cărții este ruptă.</i></li>"
            "<li><b>Dativ</b>: <i>I-am dat elevului o carte.</i></li>"
            "<li><b>Vocativ</b>: <i>Domnule profesor!</i></li></ul>"
            "<p>Definite articles are attached to the noun as suffixes (<i>masă</i> → <i>masa</i>).</p>",
        ),
        (
            "Mihai Eminescu - Life and Works",
            "Study of Romania's national poet and his major works",
            "medium",
            "<p>Mihai Eminescu (1850-1889) is considered Romania's national poet.</p>"
            "<h3>Major Works</h3><ul><li><b>Luceafărul</b> (1883): the impossible love between "
            "a mortal princess and a celestial being</li><li><b>Scrisori</b>: philosophical and "
            "satirical poems</li><li><b>Floare albastră</b>: the blue flower motif of German "
            "Romanticism</li></ul>",
        ),
        (
            "Ion Creangă - Childhood Memories",
            "Analysis of Creangă's autobiographical work",
            "hard",
            "<p>'Amintiri din copilărie' (1881-1882) describes the author's childhood in the "
            "Moldavian countryside with humor and authentic regional language.</p>"
            "<p>The first-person narration combines the child who lives the events with the "
            "adult who recalls them.</p>",
        ),
        (
            "Essay Writing for Bacalaureat - Literary Analysis",
            "Techniques for structuring and writing literary analysis essays",
            "hard",
            "<h3>Structure</h3><ol><li><b>Introducere</b>: context and thesis</li>"
            "<li><b>Cuprins</b>: themes, characters, narrative techniques, quotations</li>"
            "<li><b>Încheiere</b>: restate the argument and its significance</li></ol>"
            "<p>Analyze rather than summarize, and support every claim with the text.</p>",
        ),
        (
            "Modern Romanian Novel - Liviu Rebreanu's 'Ion'",
            "Analysis of the first modern Romanian novel and its themes",
            "medium",
            "<p>Published in 1920, 'Ion' is considered the first modern Romanian novel.</p>"
            "<p>Its central conflict opposes 'glasul pământului' (the voice of the land) to "
            "'glasul iubirii' (the voice of love). The circular structure opens and closes "
            "with a village dance.</p>",
        ),
    ],
    "Mathematics": [
        (
            "Algebra Fundamentals",
            "Basic algebraic concepts and equations",
            "easy",
            "<h3>Linear equations</h3><p>An equation <i>ax + b = 0</i> with <i>a ≠ 0</i> has the "
            "unique solution <i>x = -b/a</i>.</p><h3>Quadratic equations</h3>"
            "<p><i>ax² + bx + c = 0</i> has solutions <i>x = (-b ± √Δ) / 2a</i>, where "
            "<i>Δ = b² - 4ac</i>.</p>",
        ),
        (
            "Geometry - Triangles",
            "Properties and classification of triangles",
            "medium",
            "<h3>Triangle classification</h3><ul><li>By sides: equilateral, isosceles, scalene</li>"
            "<li>By angles: acute, right, obtuse</li></ul><p>The angles of a triangle sum to 180°. "
            "In a right triangle, <i>a² + b² = c²</i>.</p>",
        ),
        (
            "Calculus - Limits and Derivatives",
            "Introduction to limits, continuity and derivatives",
            "hard",
            "<h3>Limits</h3><p>The derivative of <i>f</i> at <i>a</i> is "
            "<i>lim<sub>h→0</sub> (f(a+h) - f(a)) / h</i>.</p><ul><li>(xⁿ)' = n·xⁿ⁻¹</li>"
            "<li>(sin x)' = cos x</li><li>(eˣ)' = eˣ</li></ul>",
        ),
        (
            "Probability and Statistics",
            "Basic probability, combinatorics and data analysis",
            "medium",
            "<h3>Probability</h3><p>P(A) = favorable cases / possible cases.</p>"
            "<ul><li>Permutations: n!</li><li>Arrangements: n! / (n-k)!</li>"
            "<li>Combinations: n! / (k!(n-k)!)</li></ul>",
        ),
        (
            "Sequences and Series",
            "Arithmetic and geometric progressions",
            "hard",
            "<h3>Arithmetic progression</h3><p>aₙ = a₁ + (n-1)r, Sₙ = n(a₁ + aₙ) / 2</p>"
            "<h3>Geometric progression</h3><p>bₙ = b₁ · qⁿ⁻¹, Sₙ = b₁(qⁿ - 1) / (q - 1) for q ≠ 1</p>",
        ),
    ],
    "English": [
        (
            "English Grammar - Tenses",
            "Overview of English verb tenses and their usage",
            "medium",
            "<p>English has 12 major tenses.</p><ul><li><b>Simple Present</b>: \"I study English.\"</li>"
            "<li><b>Present Continuous</b>: \"I am studying English.\"</li>"
            "<li><b>Present Perfect</b>: \"I have studied English.\"</li>"
            "<li><b>Present Perfect Continuous</b>: \"I have been studying English.\"</li></ul>",
        ),
        (
            "Essay Writing Skills",
            "Techniques for effective essay writing in English",
            "hard",
            "<ul><li><b>Introduction</b>: presents the topic and thesis statement</li>"
            "<li><b>Body Paragraphs</b>: one main idea each, with evidence</li>"
            "<li><b>Conclusion</b>: summarizes and restates the thesis</li></ul>",
        ),
        (
            "Reading Comprehension Strategies",
            "Techniques for understanding and analyzing English texts",
            "medium",
            "<ul><li><b>Skimming</b>: reading quickly for the main idea</li>"
            "<li><b>Scanning</b>: looking for specific information</li>"
            "<li><b>Summarizing</b>: identifying key points</li></ul>",
        ),
    ],
    "Biology": [
        (
            "Cell Structure and Function",
            "Study of cellular components and their roles",
            "medium",
            "<p>Prokaryotic cells lack a nucleus; eukaryotic cells have one.</p>"
            "<ul><li><b>Nucleus</b>: genetic material</li><li><b>Mitochondria</b>: cellular respiration</li>"
            "<li><b>Golgi Apparatus</b>: processes and packages proteins</li></ul>",
        ),
        (
            "Human Circulatory System",
            "Overview of the heart, blood vessels, and blood circulation",
            "hard",
            "<p>The four-chambered heart pumps blood through arteries, veins and capillaries.</p>"
            "<ul><li><b>Pulmonary circulation</b>: heart to lungs and back</li>"
            "<li><b>Systemic circulation</b>: heart to the rest of the body</li></ul>",
        ),
        (
            "Genetics and Inheritance",
            "Principles of genetic inheritance and DNA structure",
            "hard",
            "<p>DNA is a double helix of nucleotides (A, T, G, C). Genes are DNA segments coding "
            "for proteins.</p><ul><li>Mendel's law of segregation</li>"
            "<li>Mendel's law of independent assortment</li></ul>",
        ),
    ],
}

# subject key -> (topics completed, percent complete, days since last studied)
PROGRESS = {
    "Romanian": (12, 74, 1),
    "Mathematics": (8, 58, 2),
    "English": (14, 89, 0),
    "Biology": (6, 35, 5),
}

TESTS = [
    {
        "subject": "Romanian",
        "name": "Romanian Literature Quiz",
        "description": "Test your knowledge of Romanian literature classics",
        "time_limit": 20,
        "difficulty": "medium",
        "questions": [
            {
                "question": "Who wrote the novel 'Ion'?",
                "options": ["Liviu Rebreanu", "Mihail Sadoveanu", "Camil Petrescu", "George Călinescu"],
                "correctAnswer": 0,
                "explanation": "Liviu Rebreanu wrote 'Ion' in 1920, a novel that depicts rural life in Transylvania.",
            },
            {
                "question": "Which of the following is NOT a work by Mihai Eminescu?",
                "options": ["Luceafărul", "Floare Albastră", "Plumb", "Scrisoarea I"],
                "correctAnswer": 2,
                "explanation": "'Plumb' was written by George Bacovia, not Mihai Eminescu.",
            },
        ],
        "result": (17, 85, [(0, 0, True), (1, 2, True)]),
    },
    {
        "subject": "Mathematics",
        "name": "Mathematics Practice Exam",
        "description": "Comprehensive practice exam covering algebra and geometry",
        "time_limit": 60,
        "difficulty": "hard",
        "questions": [
            {
                "question": "Solve for x: 2x + 5 = 13",
                "options": ["x = 3", "x = 4", "x = 5", "x = 6"],
                "correctAnswer": 1,
                "explanation": "2x + 5 = 13, 2x = 8, x = 4",
            },
            {
                "question": "What is the formula for the area of a circle?",
                "options": ["A = πr²", "A = 2πr", "A = πd", "A = 4πr²"],
                "correctAnswer": 0,
                "explanation": "The area of a circle is π multiplied by the square of the radius (πr²).",
            },
        ],
        "result": (68, 68, [(0, 1, True), (1, 2, False)]),
    },
    {
        "subject": "English",
        "name": "English Grammar Test",
        "description": "Test your knowledge of English grammar rules",
        "time_limit": 30,
        "difficulty": "easy",
        "questions": [
            {
                "question": "Which sentence uses the correct form of the verb?",
                "options": [
                    "She don't know the answer.",
                    "She doesn't knows the answer.",
                    "She doesn't know the answer.",
                    "She not know the answer.",
                ],
                "correctAnswer": 2,
                "explanation": "For third-person singular in present simple negative, we use 'doesn't' + base form of the verb.",
            },
            {
                "question": "Choose the correct preposition: 'I'm afraid ___ spiders.'",
                "options": ["from", "of", "about", "for"],
                "correctAnswer": 1,
                "explanation": "The correct phrase is 'afraid of' something.",
            },
        ],
        "result": (92, 92, [(0, 2, True), (1, 1, True)]),
    },
]

BADGES = [
    ("Math Wizard", "Achieved 90% or higher on 3 math quizzes", "ri-medal-line", "math_quiz_90"),
    ("Literature Pro", "Completed all literature topics", "ri-book-mark-line", "literature_complete"),
    ("Speed Demon", "Completed a test in half the allotted time", "ri-timer-line", "fast_test"),
]

# (title, description, duration, priority, recommended)
STUDY_PLAN = [
    ("Complete Mathematics lesson on Geometric Progressions", "25 min - Continue from where you left off", 25, True, False),
    ("Practice Romanian Literary Analysis exercise", "40 min - Focus on character development in \"Ion\"", 40, False, False),
    ("Review English vocabulary flashcards", "15 min - Focus on academic vocabulary", 15, False, False),
    ("Try a short Biology quiz on Cell Structure", "20 min - This is your weakest topic", 20, False, True),
]

CHAT_MESSAGES = [
    {
        "content": "Hello! I'm your AI learning assistant. How can I help with your Bacalaureat preparation today?",
        "isUser": False,
    },
    {"content": "Can you explain the formula for geometric progressions?", "isUser": True},
    {
        "content": (
            "In a geometric progression with first term a and common ratio r, the nth term is given by: "
            "an = a1 × r^(n-1)\n\nThe sum of the first n terms is:\nSn = a1 × (1 - r^n) / (1 - r) when r ≠ 1"
            "\n\nWould you like to see an example or practice problems?"
        ),
        "isUser": False,
    },
]


def _seed_subjects(db: Session) -> Dict[str, models.Subject]:
    subjects = {}
    for data in SUBJECTS:
        subject = models.Subject(
            name=data["name"],
            description=data["description"],
            total_topics=data["total_topics"],
            icon=data["icon"],
        )
        db.add(subject)
        subjects[data["name"]] = subject
    db.flush()

    for key, topics in TOPICS.items():
        for order, (name, description, difficulty, content) in enumerate(topics, start=1):
            db.add(models.Topic(
                subject_id=subjects[key].id,
                name=name,
                description=description,
                content=content,
                order=order,
                difficulty=difficulty,
            ))
    return subjects


def _seed_tests(db: Session, user: models.User, subjects: Dict[str, models.Subject]) -> List[models.Test]:
    now = utcnow()
    tests = []
    for i, data in enumerate(TESTS):
        test = models.Test(
            name=data["name"],
            subject_id=subjects[data["subject"]].id,
            description=data["description"],
            questions=data["questions"],
            time_limit=data["time_limit"],
            difficulty=data["difficulty"],
        )
        db.add(test)
        db.flush()
        tests.append(test)

        score, percent, answers = data["result"]
        db.add(models.UserTestResult(
            user_id=user.id,
            test_id=test.id,
            score=score,
            percent_correct=percent,
            completed_at=now - timedelta(days=(i + 1) * 2),
            answers=[
                {"questionIndex": q, "selectedOption": option, "correct": correct}
                for q, option, correct in answers
            ],
        ))
    return tests


def init_demo_data(db: Session) -> None:
    """
    Seed the demo user together with the catalogue and its activity.

    Every call inserts a fresh copy of the fixtures.

    Args:
        db: Database session
    """
    now = utcnow()

    user = models.User(
        username=DEMO_USERNAME,
        password=DEMO_PASSWORD,
        display_name="Andrei Munteanu",
        email="andrei@example.com",
        created_at=now,
    )
    db.add(user)
    db.flush()

    subjects = _seed_subjects(db)

    for key, (topics_completed, percent, days_ago) in PROGRESS.items():
        db.add(models.UserProgress(
            user_id=user.id,
            subject_id=subjects[key].id,
            topics_completed=topics_completed,
            percent_complete=percent,
            last_studied=now - timedelta(days=days_ago),
        ))

    _seed_tests(db, user, subjects)

    for i, (name, description, icon, criteria) in enumerate(BADGES, start=1):
        badge = models.Badge(name=name, description=description, icon=icon, criteria=criteria)
        db.add(badge)
        db.flush()
        db.add(models.UserBadge(user_id=user.id, badge_id=badge.id, earned_at=now - timedelta(days=i * 5)))

    # Three consecutive days, ending four days ago
    for i in range(3):
        db.add(models.StudyStreak(
            user_id=user.id,
            date=now - timedelta(days=6 - i),
            minutes_studied=45 + i * 15,
        ))

    tomorrow = now + timedelta(days=1)
    for title, description, duration, priority, recommended in STUDY_PLAN:
        db.add(models.StudyPlanTask(
            user_id=user.id,
            title=title,
            description=description,
            duration=duration,
            priority=priority,
            recommended=recommended,
            completed=False,
            due_date=tomorrow,
        ))

    db.add(models.AiChatHistory(user_id=user.id, messages=CHAT_MESSAGES, created_at=now, updated_at=now))

    db.commit()
    logger.info(f"Demo data seeded for user {user.id} ({user.username})")
