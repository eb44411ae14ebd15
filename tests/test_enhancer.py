import os
import sys
import unittest
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.enhance.llm import EnhancerLLMError, text_completion  # noqa: E402
from resume_ats.enhance.prompt import build_enhancement_prompt  # noqa: E402
from resume_ats.enhance.rewriter import rewrite_locally  # noqa: E402
from resume_ats.enhance.service import describe_improvements, enhance_resume  # noqa: E402
from resume_ats.schemas import ATSScore, EnhancementRequest  # noqa: E402
from resume_ats.scoring import score  # noqa: E402

RESUME = (
    "Jane Doe\n"
    "jane@example.com\n"
    "\n"
    "PROFESSIONAL SUMMARY\n"
    "Engineer with 5 years of experience.\n"
    "\n"
    "EXPERIENCE\n"
    "Engineer | Acme | 2019 - Present\n"
    "- Led migration to Kubernetes\n"
    "- Managed on-call rotation\n"
    "\n"
    "SKILLS\n"
    "Python, Go"
)


class LocalRewriteTests(unittest.TestCase):
    def test_rewrite_adds_summary_skills_and_stronger_verbs(self):
        enhanced = rewrite_locally(
            RESUME,
            target_role="Staff Engineer",
            industry="technology",
            keywords=["Python", "Terraform"],
        )

        self.assertIn(
            "PROFESSIONAL SUMMARY\nResults-driven Staff Engineer with proven expertise "
            "in delivering high-impact solutions.\nEngineer with 5 years",
            enhanced,
        )
        self.assertIn("SKILLS\n• Technology Industry Expertise\n• Terraform\nPython, Go", enhanced)
        self.assertIn("• Successfully led migration to Kubernetes", enhanced)
        self.assertIn("• Effectively managed on-call rotation", enhanced)

    def test_rewrite_is_stable_on_its_own_output(self):
        kwargs = {"target_role": "Staff Engineer", "industry": "technology", "keywords": ["Terraform"]}
        once = rewrite_locally(RESUME, **kwargs)
        self.assertEqual(rewrite_locally(once, **kwargs), once)

    def test_missing_sections_are_created(self):
        text = "Jane Doe\njane@example.com\n\nEXPERIENCE\nAnalyst | Initech | 2019 - 2021\n- Built dashboards"
        enhanced = rewrite_locally(text, target_role="Analyst", keywords=["SQL"])

        self.assertTrue(
            enhanced.startswith("Jane Doe\njane@example.com\n\nPROFESSIONAL SUMMARY\nResults-driven Analyst")
        )
        self.assertTrue(enhanced.endswith("\n\nSKILLS\n• SQL"))
        self.assertIn("• Built dashboards", enhanced)


class ImprovementTests(unittest.TestCase):
    def test_describe_improvements(self):
        old = ATSScore(keywords=50, formatting=70, readability=70, structure=70)
        new = ATSScore(keywords=62, formatting=70, readability=65, structure=74)

        self.assertEqual(
            describe_improvements(old, new),
            [
                "Improved keyword optimization (+12 points)",
                "Better content organization (+4 points)",
                "Overall ATS score improved from 65 to 68",
            ],
        )

    def test_prompt_mentions_scores_and_targets(self):
        prompt = build_enhancement_prompt(
            original_text=RESUME,
            ats_score=ATSScore(keywords=50, formatting=70, readability=70, structure=70),
            target_role="Staff Engineer",
            keywords=["Terraform"],
        )
        self.assertIn("- Keywords: 50/100", prompt)
        self.assertIn("Target role: Staff Engineer", prompt)
        self.assertIn("Important keywords to include: Terraform", prompt)
        self.assertTrue(prompt.rstrip().endswith("return only the enhanced resume text."))


class EnhanceServiceTests(unittest.TestCase):
    def setUp(self):
        self.request = EnhancementRequest(
            original_text=RESUME,
            target_role="Staff Engineer",
            industry="technology",
            keywords=["Terraform"],
        )

    def test_local_rewrite_when_llm_disabled(self):
        with patch("resume_ats.enhance.service.enhancer_llm_enabled", return_value=False):
            response = enhance_resume(self.request)

        self.assertEqual(response.source, "local")
        self.assertEqual(response.new_score, score(response.enhanced_text, domain_hint="technology"))
        self.assertTrue(response.improvements[-1].startswith("Overall ATS score"))

    def test_llm_rewrite_is_rescored(self):
        with patch("resume_ats.enhance.service.enhancer_llm_enabled", return_value=True), patch(
            "resume_ats.enhance.service.text_completion", return_value="LLM rewritten resume"
        ) as completion:
            response = enhance_resume(self.request)

        completion.assert_called_once()
        self.assertEqual(response.source, "llm")
        self.assertEqual(response.enhanced_text, "LLM rewritten resume")
        self.assertEqual(response.new_score, score("LLM rewritten resume", domain_hint="technology"))

    def test_llm_failure_falls_back_to_local(self):
        with patch("resume_ats.enhance.service.enhancer_llm_enabled", return_value=True), patch(
            "resume_ats.enhance.service.text_completion",
            side_effect=EnhancerLLMError("boom", code="llm_exception"),
        ), self.assertLogs("resume_ats.enhance.service", level="WARNING"):
            response = enhance_resume(self.request)

        self.assertEqual(response.source, "local")
        self.assertIn("Results-driven Staff Engineer", response.enhanced_text)


class TextCompletionTests(unittest.TestCase):
    def test_disabled_provider(self):
        with patch.dict(os.environ, {"ENHANCER_LLM_ENABLED": "0"}):
            with self.assertRaises(EnhancerLLMError) as ctx:
                text_completion(user_prompt="hello")
        self.assertEqual(ctx.exception.code, "llm_disabled")

    def test_provider_exception_is_normalized(self):
        with patch("resume_ats.enhance.llm.enhancer_llm_enabled", return_value=True), patch(
            "resume_ats.enhance.llm._client"
        ) as client:
            client.return_value.chat.completions.create.side_effect = RuntimeError("timeout")
            with self.assertRaises(EnhancerLLMError) as ctx:
                text_completion(user_prompt="hello")
        self.assertEqual(ctx.exception.code, "llm_exception")

    def test_empty_response(self):
        with patch("resume_ats.enhance.llm.enhancer_llm_enabled", return_value=True), patch(
            "resume_ats.enhance.llm._client"
        ) as client:
            client.return_value.chat.completions.create.return_value = SimpleNamespace(choices=[])
            with self.assertRaises(EnhancerLLMError) as ctx:
                text_completion(user_prompt="hello")
        self.assertEqual(ctx.exception.code, "empty_response")

    def test_completion_text(self):
        message = SimpleNamespace(content="  Enhanced resume  ")
        with patch("resume_ats.enhance.llm.enhancer_llm_enabled", return_value=True), patch(
            "resume_ats.enhance.llm._client"
        ) as client:
            client.return_value.chat.completions.create.return_value = SimpleNamespace(
                choices=[SimpleNamespace(message=message)]
            )
            self.assertEqual(text_completion(user_prompt="hello"), "Enhanced resume")


if __name__ == "__main__":
    unittest.main()
