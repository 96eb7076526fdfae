"""
State and value types for the follow-up question loop.

The server keeps no session memory between calls: every request carries the
full history (base answers first, then AI follow-up pairs) and the
conversation state is rebuilt by replaying it. ConversationState is that
replayed state machine.

    NOT_STARTED --request_next--> AWAITING_ANSWER --record_answer--> READY
         READY  --request_next--> AWAITING_ANSWER
    any record_answer reaching the cap --> EXHAUSTED (submit only)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, TypedDict


class QAPair(TypedDict):
    """One question/answer entry of the conversation history."""
    question: str
    answer: str


class FollowupStatus(str, Enum):
    NOT_STARTED = "not_started"
    AWAITING_ANSWER = "awaiting_answer"
    READY = "ready"
    EXHAUSTED = "exhausted"


class ConversationError(ValueError):
    """A transition was requested that the current state does not allow."""


@dataclass
class FollowupRequest:
    """Everything the question generator needs for one follow-up."""
    mode: str  # "owner" | "public"
    role_summary: str
    base_questions: List[str]
    history: List[QAPair]
    resume_profile: Optional[Dict[str, Any]]


@dataclass
class FollowupResult:
    """Outcome of one generation attempt: a question, or a caller-facing error."""
    ok: bool
    question: Optional[str] = None
    error: Optional[str] = None
    status: int = 200

    @classmethod
    def success(cls, question: str) -> "FollowupResult":
        return cls(ok=True, question=question)

    @classmethod
    def failure(cls, error: str, status: int) -> "FollowupResult":
        return cls(ok=False, error=error, status=status)


@dataclass
class PromptRequest:
    """A fully built prompt, independent of any transport."""
    system: str
    user: str
    temperature: float


@dataclass
class ConversationState:
    """
    Replayable follow-up state for one candidate response.

    ``base_history`` holds the base-question answers in form order and
    ``ai_history`` the follow-up pairs in generation order. ``pending_question``
    is the question issued by the current call; a replayed state never has one.
    """
    max_ai_questions: int
    base_history: List[QAPair] = field(default_factory=list)
    ai_history: List[QAPair] = field(default_factory=list)
    pending_question: Optional[str] = None

    @property
    def used(self) -> int:
        return len(self.ai_history)

    @property
    def remaining(self) -> int:
        return max(0, self.max_ai_questions - self.used)

    @property
    def status(self) -> FollowupStatus:
        if self.pending_question is not None:
            return FollowupStatus.AWAITING_ANSWER
        if self.used >= self.max_ai_questions:
            return FollowupStatus.EXHAUSTED
        if self.used == 0:
            return FollowupStatus.NOT_STARTED
        return FollowupStatus.READY

    @property
    def is_exhausted(self) -> bool:
        return self.status == FollowupStatus.EXHAUSTED

    def history(self) -> List[QAPair]:
        """Full model context: base answers, then AI pairs."""
        return list(self.base_history) + list(self.ai_history)

    def can_request_next(self) -> bool:
        return self.status in (FollowupStatus.NOT_STARTED, FollowupStatus.READY)

    def ask(self, question: str) -> None:
        """Enter AWAITING_ANSWER with a freshly generated question."""
        if not self.can_request_next():
            raise ConversationError(
                f"Cannot ask a follow-up while conversation is {self.status.value}"
            )
        self.pending_question = question

    def record_answer(self, question: str, answer: str) -> FollowupStatus:
        """
        Append an answered follow-up and advance the state.

        Returns:
            The new status: READY, or EXHAUSTED once the cap is reached
        """
        if self.is_exhausted:
            raise ConversationError("All follow-up questions have been answered; submit the response")

        self.ai_history.append({"question": question, "answer": answer})
        self.pending_question = None
        return self.status

    @classmethod
    def replay(
        cls,
        history: List[QAPair],
        base_question_count: int,
        max_ai_questions: int,
    ) -> "ConversationState":
        """
        Rebuild the state from a client-supplied history.

        The first ``base_question_count`` entries are base answers; each later
        entry is replayed as an answered follow-up, a blank (skipped) answer
        included. The client only sends questions it has already shown.

        Raises:
            ConversationError: If the history holds more follow-ups than the cap
        """
        entries = [
            {"question": qa.get("question") or "", "answer": qa.get("answer") or ""}
            for qa in (history or [])
        ]
        state = cls(max_ai_questions=max_ai_questions, base_history=entries[:base_question_count])

        for qa in entries[base_question_count:]:
            if state.is_exhausted:
                raise ConversationError(
                    f"History contains more than {max_ai_questions} follow-up answers"
                )
            state.record_answer(qa["question"], qa["answer"])

        return state
