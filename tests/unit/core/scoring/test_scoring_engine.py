#!/usr/bin/env python3
"""
Tests for ScoringEngine: point awards, endorsement counts and atomicity.
"""

import unittest

from core.config_loader import ScoringConfig
from core.errors import InvalidInputError, NotFoundError
from core.levels import level_for_points
from core.scoring import ScoringEngine
from database.models import Proficiency
from database.uow import store_uow
from tests import StoreTestCase


class TestCreateUser(StoreTestCase):

    def test_create_user_starts_at_zero(self):
        user = self.engine_call("create_user", "ada", "ada@company.com", "Ada L", "Engineer")

        stored = self.reload_user(user.id)
        self.assertEqual(stored.points, 0)
        self.assertEqual(stored.level, 1)

    def test_duplicate_username_and_email_rejected(self):
        self.engine_call("create_user", "ada", "ada@company.com", "Ada L", "Engineer")

        with self.assertRaises(InvalidInputError) as ctx:
            self.engine_call("create_user", "ada", "ada@company.com", "Other", "Engineer")

        fields = {d["field"] for d in ctx.exception.details}
        self.assertEqual(fields, {"username", "email"})

    def test_ids_are_never_reused(self):
        first = self.engine_call("create_user", "a", "a@company.com", "A", "Engineer")
        second = self.engine_call("create_user", "b", "b@company.com", "B", "Engineer")
        self.assertGreater(second.id, first.id)


class TestAddSkill(StoreTestCase):

    def setUp(self):
        super().setUp()
        self.user = self.make_user("alice")

    def test_add_skill_awards_ten_points(self):
        skill = self.engine_call("add_skill", self.user.id, "Python", "Technical", "Expert")

        self.assertEqual(skill.endorsement_count, 0)
        self.assertEqual(skill.source, "manual")
        self.assertIsNotNone(skill.created_at)
        self.assertEqual(self.reload_user(self.user.id).points, 10)

    def test_n_skills_award_ten_each(self):
        for i in range(7):
            self.engine_call("add_skill", self.user.id, f"Skill {i}", "Technical", "Beginner")
        self.assertEqual(self.reload_user(self.user.id).points, 70)

    def test_source_is_kept(self):
        skill = self.engine_call("add_skill", self.user.id, "Go", "Technical", "Advanced", source="linkedin")
        self.assertEqual(skill.source, "linkedin")

    def test_accepts_proficiency_enum(self):
        skill = self.engine_call("add_skill", self.user.id, "Go", "Technical", Proficiency.ADVANCED)
        self.assertEqual(skill.proficiency, "Advanced")

    def test_unknown_user_is_not_found(self):
        with self.assertRaises(NotFoundError):
            self.engine_call("add_skill", 999, "Python", "Technical", "Expert")

    def test_invalid_proficiency_names_the_field(self):
        with self.assertRaises(InvalidInputError) as ctx:
            self.engine_call("add_skill", self.user.id, "Python", "Technical", "Guru")

        self.assertEqual(ctx.exception.details[0]["field"], "proficiency")
        self.assertEqual(self.reload_user(self.user.id).points, 0)

    def test_missing_name_rejected_before_mutation(self):
        with self.assertRaises(InvalidInputError):
            self.engine_call("add_skill", self.user.id, "  ", "Technical", "Expert")

        with store_uow(self.db) as store:
            self.assertEqual(store.skills.list_for_user(self.user.id), [])

    def test_custom_award_from_config(self):
        with store_uow(self.db) as store:
            ScoringEngine(store, ScoringConfig(skill_added_points=3)).add_skill(
                self.user.id, "Rust", "Technical", "Beginner"
            )
        self.assertEqual(self.reload_user(self.user.id).points, 3)


class TestAddSkillsBulk(StoreTestCase):

    def setUp(self):
        super().setUp()
        self.user = self.make_user("bob")
        self.items = [
            {"name": f"Skill {i}", "category": "Technical", "proficiency": "Intermediate"}
            for i in range(5)
        ]

    def test_bulk_creates_all_and_awards_once(self):
        skills = self.engine_call("add_skills_bulk", self.user.id, self.items)

        self.assertEqual(len(skills), 5)
        self.assertEqual([s.name for s in skills], [f"Skill {i}" for i in range(5)])
        self.assertEqual(self.reload_user(self.user.id).points, 50)

    def test_invalid_item_creates_nothing(self):
        self.items[3]["proficiency"] = "Wizard"

        with self.assertRaises(InvalidInputError) as ctx:
            self.engine_call("add_skills_bulk", self.user.id, self.items)

        self.assertEqual(ctx.exception.details[0]["field"], "skills[3].proficiency")
        with store_uow(self.db) as store:
            self.assertEqual(store.skills.count(), 0)
        self.assertEqual(self.reload_user(self.user.id).points, 0)

    def test_payload_must_be_a_sequence(self):
        for bad in ("Python", {"name": "Python"}, 42, None):
            with self.assertRaises(InvalidInputError):
                self.engine_call("add_skills_bulk", self.user.id, bad)

    def test_item_for_other_owner_rejected(self):
        other = self.make_user("carol")
        self.items[1]["userId"] = other.id

        with self.assertRaises(InvalidInputError) as ctx:
            self.engine_call("add_skills_bulk", self.user.id, self.items)
        self.assertEqual(ctx.exception.details[0]["field"], "skills[1].userId")

    def test_empty_batch_awards_nothing(self):
        self.assertEqual(self.engine_call("add_skills_bulk", self.user.id, []), [])
        self.assertEqual(self.reload_user(self.user.id).points, 0)

    def test_store_failure_mid_batch_rolls_back(self):
        with self.assertRaises(RuntimeError):
            with store_uow(self.db) as store:
                ScoringEngine(store).add_skills_bulk(self.user.id, self.items)
                raise RuntimeError("connection lost")

        with store_uow(self.db) as store:
            self.assertEqual(store.skills.count(), 0)
        self.assertEqual(self.reload_user(self.user.id).points, 0)


class TestUpdateAndDeleteSkill(StoreTestCase):

    def setUp(self):
        super().setUp()
        self.owner = self.make_user("owner")
        self.peer = self.make_user("peer")
        self.skill = self.engine_call("add_skill", self.owner.id, "SQL", "Technical", "Beginner")

    def test_update_merges_fields(self):
        updated = self.engine_call("update_skill", self.skill.id, {"proficiency": "Expert"})

        self.assertEqual(updated.proficiency, "Expert")
        self.assertEqual(updated.name, "SQL")

    def test_update_cannot_touch_endorsement_count(self):
        with self.assertRaises(InvalidInputError):
            self.engine_call("update_skill", self.skill.id, {"endorsement_count": 99})
        self.assertEqual(self.reload_skill(self.skill.id).endorsement_count, 0)

    def test_update_unknown_skill(self):
        with self.assertRaises(NotFoundError):
            self.engine_call("update_skill", 404, {"name": "x"})

    def test_delete_cascades_endorsements_without_reversal(self):
        self.engine_call("endorse_skill", self.skill.id, self.peer.id, self.owner.id)

        removed = self.engine_call("delete_skill", self.skill.id)

        self.assertEqual(removed, 1)
        self.assertIsNone(self.reload_skill(self.skill.id))
        with store_uow(self.db) as store:
            self.assertEqual(store.endorsements.list(), [])
        # 10 for the skill + 15 received, kept after deletion
        self.assertEqual(self.reload_user(self.owner.id).points, 25)
        self.assertEqual(self.reload_user(self.peer.id).points, 5)

    def test_delete_unknown_skill(self):
        with self.assertRaises(NotFoundError):
            self.engine_call("delete_skill", 12345)


class TestEndorsements(StoreTestCase):

    def setUp(self):
        super().setUp()
        self.a = self.make_user("user_a")
        self.b = self.make_user("user_b")
        self.c = self.make_user("user_c")
        with store_uow(self.db) as store:
            # Insert directly so A starts from 0 points
            self.skill = store.skills.create(
                user_id=self.a.id, name="Kotlin", category="Technical",
                proficiency="Advanced", endorsement_count=0
            )

    def test_single_endorsement_scenario(self):
        self.engine_call("endorse_skill", self.skill.id, self.b.id, self.a.id, comment="Great")

        self.assertEqual(self.reload_skill(self.skill.id).endorsement_count, 1)
        self.assertEqual(self.reload_user(self.a.id).points, 15)
        self.assertEqual(self.reload_user(self.b.id).points, 5)

    def test_two_endorsers(self):
        self.engine_call("endorse_skill", self.skill.id, self.b.id, self.a.id)
        self.engine_call("endorse_skill", self.skill.id, self.c.id, self.a.id)

        self.assertEqual(self.reload_skill(self.skill.id).endorsement_count, 2)
        self.assertEqual(self.reload_user(self.a.id).points, 30)

    def test_unknown_references_are_not_found(self):
        with self.assertRaises(NotFoundError):
            self.engine_call("endorse_skill", 999, self.b.id, self.a.id)
        with self.assertRaises(NotFoundError):
            self.engine_call("endorse_skill", self.skill.id, 999, self.a.id)
        with self.assertRaises(NotFoundError):
            self.engine_call("endorse_skill", self.skill.id, self.b.id, 999)

        self.assertEqual(self.reload_skill(self.skill.id).endorsement_count, 0)
        self.assertEqual(self.reload_user(self.b.id).points, 0)

    def test_count_tracks_live_endorsements(self):
        ids = [
            self.engine_call("endorse_skill", self.skill.id, endorser.id, self.a.id).id
            for endorser in (self.b, self.c, self.b, self.c)
        ]
        self.engine_call("remove_endorsement", ids[0])
        self.engine_call("remove_endorsement", ids[2])
        self.engine_call("endorse_skill", self.skill.id, self.b.id, self.a.id)

        count = self.reload_skill(self.skill.id).endorsement_count
        self.assertEqual(count, 3)
        self.assertEqual(count, self.live_endorsement_count(self.skill.id))

    def test_remove_keeps_points(self):
        endorsement = self.engine_call("endorse_skill", self.skill.id, self.b.id, self.a.id)
        self.engine_call("remove_endorsement", endorsement.id)

        self.assertEqual(self.reload_skill(self.skill.id).endorsement_count, 0)
        self.assertEqual(self.reload_user(self.a.id).points, 15)
        self.assertEqual(self.reload_user(self.b.id).points, 5)

    def test_remove_unknown_endorsement(self):
        with self.assertRaises(NotFoundError):
            self.engine_call("remove_endorsement", 77)

    def test_remove_twice_is_not_found(self):
        endorsement = self.engine_call("endorse_skill", self.skill.id, self.b.id, self.a.id)
        self.engine_call("remove_endorsement", endorsement.id)
        with self.assertRaises(NotFoundError):
            self.engine_call("remove_endorsement", endorsement.id)

    def test_ids_must_be_integers(self):
        with self.assertRaises(InvalidInputError):
            self.engine_call("endorse_skill", "1", self.b.id, self.a.id)


class TestGrantAchievement(StoreTestCase):

    def test_achievement_points_go_to_owner_only(self):
        users = [self.make_user(f"u{i}", points=40) for i in range(3)]

        achievement = self.engine_call(
            "grant_achievement", users[2].id, type="milestone", title="t", description="d", points=25
        )

        self.assertEqual(achievement.points, 25)
        self.assertEqual(self.reload_user(users[2].id).points, 65)
        self.assertEqual(self.reload_user(users[0].id).points, 40)
        self.assertEqual(self.reload_user(users[1].id).points, 40)

    def test_points_default_to_zero(self):
        user = self.make_user("dora")
        achievement = self.engine_call("grant_achievement", user.id, "badge", "First skill", "Added a skill")

        self.assertEqual(achievement.points, 0)
        self.assertEqual(self.reload_user(user.id).points, 0)

    def test_negative_points_rejected(self):
        user = self.make_user("eve")
        with self.assertRaises(InvalidInputError):
            self.engine_call("grant_achievement", user.id, "badge", "t", "d", points=-5)

    def test_unknown_user(self):
        with self.assertRaises(NotFoundError):
            self.engine_call("grant_achievement", 42, "badge", "t", "d", points=5)

    def test_level_follows_points(self):
        user = self.make_user("frank", points=90)
        self.engine_call("grant_achievement", user.id, "bonus", "t", "d", points=15)

        stored = self.reload_user(user.id)
        self.assertEqual(stored.points, 105)
        self.assertEqual(stored.level, level_for_points(105))
        self.assertEqual(stored.level, 2)


if __name__ == "__main__":
    unittest.main()
