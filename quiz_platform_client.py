"""Quiz platform API client.

This module wraps the REST APIs of the quiz and question services in
small client classes built on the ``requests`` library:

* :class:`QuizServiceClient` – create, fetch and list quizzes.
* :class:`QuestionServiceClient` – create, fetch and list questions,
  including the questions recorded against a quiz.
* :class:`QuizPlatformClient` – holds one client per service and
  combines them, e.g. :meth:`QuizPlatformClient.get_quiz_with_questions`.

The services never call each other; composing a quiz with its
questions happens here, on the caller's side.

Every method returns a ``(data, error)`` tuple.  On success ``error``
is ``None``.  On failure ``data`` is ``None`` (or an empty list for
list operations) and ``error`` is a dictionary with the keys
``status_code`` and ``message``.  Network failures are reported the
same way with ``status_code`` set to ``None``; nothing is raised.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]

DEFAULT_TIMEOUT = 15


class _ServiceClient:
    """Shared HTTP plumbing for the per-service clients."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Root URL of the service, e.g. ``http://localhost:8081``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and decode the JSON response.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to :attr:`base_url` (e.g. ``/quiz/getAll``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _get_one(self, path: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return None, error
        return data, None

    def _get_list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], {"status_code": None, "message": f"Expected a list from {path}"}

    def _create(self, path: str, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("POST", path, json_body=payload)
        if error:
            return None, error
        return data, None


class QuizServiceClient(_ServiceClient):
    """Client for the quiz service (base path ``/quiz``)."""

    def create_quiz(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a quiz.

        Args:
            payload: Quiz fields, e.g. ``{"title": "Math"}``.
        Returns:
            A tuple ``(quiz, error)``; ``quiz`` carries the assigned ``id``.
        """
        return self._create("/quiz/create", payload)

    def get_quiz(self, quiz_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a quiz.  A missing quiz yields an error with status 404."""
        return self._get_one(f"/quiz/get/{quiz_id}")

    def list_quizzes(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._get_list("/quiz/getAll")


class QuestionServiceClient(_ServiceClient):
    """Client for the question service (base path ``/question``)."""

    def create_question(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a question.

        Args:
            payload: Question fields, e.g. ``{"text": "2+2?", "quizId": 1}``.
        Returns:
            A tuple ``(question, error)``.
        """
        return self._create("/question/create", payload)

    def get_question(self, question_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._get_one(f"/question/get/{question_id}")

    def list_questions(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._get_list("/question/getAll")

    def list_questions_of_quiz(self, quiz_id: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve the questions recorded against ``quiz_id``.

        An unknown quiz id is not an error; the list is simply empty.
        """
        return self._get_list(f"/question/quiz/{quiz_id}")


class QuizPlatformClient:
    """Convenience wrapper holding a client for each service."""

    def __init__(
        self,
        *,
        quiz_url: str,
        question_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        session = session or requests.Session()
        self.quizzes = QuizServiceClient(base_url=quiz_url, session=session, timeout=timeout)
        self.questions = QuestionServiceClient(base_url=question_url, session=session, timeout=timeout)

    def get_quiz_with_questions(self, quiz_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Fetch a quiz and attach its questions under the ``questions`` key.

        Returns:
            A tuple ``(quiz, error)``.  If either call fails the error of
            the first failing call is returned and ``quiz`` is ``None``.
        """
        quiz, error = self.quizzes.get_quiz(quiz_id)
        if error:
            return None, error
        questions, error = self.questions.list_questions_of_quiz(quiz_id)
        if error:
            return None, error
        return {**quiz, "questions": questions}, None
