"""
Grading of submitted tests through the completion provider.

The provider is asked for a fixed ``Score: X/10`` / ``Feedback:`` layout,
the score is pulled out of the reply and the submission is stored together
with the full evaluation text.
"""
from typing import Any, Dict, List
import logging

from ..schemas.test import TestResultCreate
from ..utils.completion_service import CompletionService, DEFAULT_MAX_TOKENS
from ..utils.scoring import extract_score, is_passing
from .persistence_service import PersistenceService

logger = logging.getLogger(__name__)

EVALUATION_HEADER = """Evaluate the following answers based on the given test questions.
Provide a score out of 10, and return the result in this format strictly:

Score: X/10

Feedback: (Detailed feedback on each answer)

"""


def build_evaluation_prompt(questions: List[Any], answers: List[Any]) -> str:
    """Instruction header followed by numbered question/answer pairs.

    A question without a matching answer is rendered with an empty answer.
    """
    if not isinstance(questions, list) or not isinstance(answers, list):
        raise TypeError("questions and answers must be lists")

    pairs = []
    for number, question in enumerate(questions, start=1):
        answer = answers[number - 1] if number <= len(answers) else ""
        pairs.append(f"**Q{number}**: {question}\n**A{number}**: {answer}\n\n")
    return EVALUATION_HEADER + "".join(pairs)


async def evaluate_submission(
    email: str,
    skill: str,
    questions: List[Any],
    answers: List[Any],
    completion: CompletionService,
    persistence: PersistenceService,
) -> Dict[str, Any]:
    """Grade a submission, store it and return score, evaluation text and pass flag.

    The stored record is shaped before the completion call so a malformed
    submission never costs an evaluation.
    """
    prompt = build_evaluation_prompt(questions, answers)
    record = TestResultCreate(
        email=email,
        skill=skill,
        score=0,
        questions=questions,
        answers=answers,
        feedback="",
    )

    evaluation = await completion.complete(prompt, max_tokens=DEFAULT_MAX_TOKENS)

    score = extract_score(evaluation)
    logger.info(f"Evaluated {record.skill} test for {record.email}: score {score}/10")

    await persistence.record_test_result(
        record.model_copy(update={"score": score, "feedback": evaluation})
    )

    return {
        "score": score,
        "evaluation": evaluation,
        "passed": is_passing(score),
    }
