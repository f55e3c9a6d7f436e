"""
Demo data for a fresh store.

Users start with historic point totals. Skills start at zero endorsements
and each sample endorsement bumps its skill's count, so the count always
matches the endorsement rows. Seeding awards no points.
"""

import logging

from database.repository import EntityStore

logger = logging.getLogger(__name__)

SAMPLE_USERS = [
    {"username": "john_doe", "email": "john@company.com", "name": "John Doe", "role": "Software Engineer", "points": 1250},
    {"username": "sarah_johnson", "email": "sarah@company.com", "name": "Sarah Johnson", "role": "Frontend Developer", "points": 980},
    {"username": "michael_chen", "email": "michael@company.com", "name": "Michael Chen", "role": "Backend Developer", "points": 720},
    {"username": "emma_wilson", "email": "emma@company.com", "name": "Emma Wilson", "role": "Project Manager", "points": 1450},
    {"username": "david_kumar", "email": "david@company.com", "name": "David Kumar", "role": "DevOps Engineer", "points": 890},
]

# (owner username, name, category, proficiency)
SAMPLE_SKILLS = [
    ("john_doe", "JavaScript", "Technical", "Expert"),
    ("john_doe", "React", "Technical", "Advanced"),
    ("john_doe", "Node.js", "Technical", "Intermediate"),
    ("john_doe", "Leadership", "Soft Skills", "Expert"),
    ("john_doe", "Communication", "Soft Skills", "Expert"),
    ("john_doe", "Project Management", "Soft Skills", "Advanced"),
    ("sarah_johnson", "React", "Technical", "Expert"),
    ("sarah_johnson", "Vue.js", "Technical", "Advanced"),
    ("sarah_johnson", "UI/UX Design", "Technical", "Advanced"),
    ("michael_chen", "Node.js", "Technical", "Expert"),
    ("michael_chen", "Python", "Technical", "Advanced"),
    ("michael_chen", "AWS", "Technical", "Intermediate"),
    ("emma_wilson", "Agile", "Soft Skills", "Expert"),
    ("emma_wilson", "Scrum", "Soft Skills", "Expert"),
    ("emma_wilson", "Leadership", "Soft Skills", "Expert"),
]

# (endorser username, endorsee username, skill name, comment)
SAMPLE_ENDORSEMENTS = [
    ("sarah_johnson", "john_doe", "JavaScript",
     "John's JavaScript expertise is exceptional. He consistently delivers high-quality code."),
    ("michael_chen", "john_doe", "Leadership",
     "Great team leader with excellent communication skills."),
    ("john_doe", "sarah_johnson", "React",
     "Sarah's React skills are top-notch. She creates amazing user interfaces."),
    ("sarah_johnson", "michael_chen", "Node.js",
     "Michael's backend development skills are impressive."),
]


def seed_sample_data(store: EntityStore) -> bool:
    """Populate an empty store. Returns False when data already exists."""
    if not store.is_empty():
        logger.info("Store already populated, skipping sample data")
        return False

    users = {}
    for fields in SAMPLE_USERS:
        user = store.users.create(**fields)
        users[user.username] = user

    skills = {}
    for owner, name, category, proficiency in SAMPLE_SKILLS:
        skill = store.skills.create(
            user_id=users[owner].id,
            name=name,
            category=category,
            proficiency=proficiency,
            endorsement_count=0,
            source="manual"
        )
        skills[(owner, name)] = skill

    for endorser, endorsee, skill_name, comment in SAMPLE_ENDORSEMENTS:
        skill = skills[(endorsee, skill_name)]
        store.endorsements.create(
            skill_id=skill.id,
            endorser_id=users[endorser].id,
            endorsee_id=users[endorsee].id,
            comment=comment
        )
        skill.endorsement_count += 1

    store.db.flush()
    logger.info(
        f"Seeded {len(SAMPLE_USERS)} users, {len(SAMPLE_SKILLS)} skills, "
        f"{len(SAMPLE_ENDORSEMENTS)} endorsements"
    )
    return True
