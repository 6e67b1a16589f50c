from shorts_studio.agents.system.hearing_agent import HearingAgent
from shorts_studio.core.llm import GeminiHearingClient
from shorts_studio.core.state import HearingAIResponse, HearingMessage, HearingResponseType
from shorts_studio.prompts import FALLBACK_QUESTIONS, HEARING_COMPLETE_MESSAGE

from .fakes import FakeHearingClient, FakeLLM

NO_CONTENT = HearingAIResponse(type=HearingResponseType.QUESTION)


def history_with(assistant_turns):
    history = []
    for i in range(assistant_turns):
        history.append(HearingMessage(role="assistant", content=f"Q{i}"))
        history.append(HearingMessage(role="user", content=f"A{i}"))
    return history


def test_model_question_is_returned():
    client = FakeHearingClient(HearingAIResponse(type=HearingResponseType.QUESTION, content="誰向けですか？"))
    response = HearingAgent(client).generate_next_question("朝の習慣", [])

    assert response.type == HearingResponseType.QUESTION
    assert response.content == "誰向けですか？"
    assert client.calls == [("朝の習慣", [])]


def test_model_completion_is_returned():
    client = FakeHearingClient(HearingAIResponse(type=HearingResponseType.COMPLETE, content="完了です"))
    response = HearingAgent(client).generate_next_question("朝の習慣", history_with(3))
    assert response.type == HearingResponseType.COMPLETE
    assert response.content == "完了です"


def test_completion_without_content_stays_complete():
    client = FakeHearingClient(HearingAIResponse(type=HearingResponseType.COMPLETE))
    response = HearingAgent(client).generate_next_question("朝の習慣", history_with(3))
    assert response.type == HearingResponseType.COMPLETE
    assert response.content == HEARING_COMPLETE_MESSAGE


def test_gemini_completion_with_empty_content_stays_complete():
    llm = FakeLLM(output='{"type": "complete", "content": ""}')
    response = HearingAgent(GeminiHearingClient(llm=llm)).generate_next_question("朝の習慣", history_with(3))
    assert response.type == HearingResponseType.COMPLETE
    assert response.content


def test_model_error_is_propagated():
    client = FakeHearingClient(HearingAIResponse(type=HearingResponseType.ERROR, error="rate limited"))
    response = HearingAgent(client).generate_next_question("朝の習慣", [])
    assert response.type == HearingResponseType.ERROR
    assert response.error == "rate limited"
    assert response.content is None


def test_raised_exception_becomes_error():
    response = HearingAgent(FakeHearingClient(TimeoutError("slow"))).generate_next_question("朝の習慣", [])
    assert response.type == HearingResponseType.ERROR
    assert response.error == "slow"


def test_opening_fallback_mentions_topic():
    response = HearingAgent(FakeHearingClient(NO_CONTENT)).generate_next_question("朝の習慣", [])
    assert response.type == HearingResponseType.QUESTION
    assert response.content.startswith("「朝の習慣」についてのショート動画を作成しますね。")


def test_fallback_cycles_by_assistant_turns():
    agent = HearingAgent(FakeHearingClient(NO_CONTENT))
    contents = [agent.generate_next_question("朝の習慣", history_with(n)).content for n in range(1, 5)]
    assert contents == [FALLBACK_QUESTIONS[1], FALLBACK_QUESTIONS[2], FALLBACK_QUESTIONS[0], FALLBACK_QUESTIONS[1]]
