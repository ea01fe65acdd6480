import datetime
import threading

from database.storage import MemoryStore
from schema.assessment import AssessmentCreate


def _create(store, symptoms="persistent dry cough at night"):
    data = AssessmentCreate(
        primary_symptoms=symptoms,
        duration="4-7-days",
        severity=4,
        age=52,
        gender="male",
    )
    return store.create_assessment(data)


def test_ids_start_at_one_and_increase(store):
    ids = [_create(store).id for _ in range(3)]
    assert ids == [1, 2, 3]


def test_message_ids_are_independent(store):
    _create(store)
    _create(store)
    msg = store.create_message("hello", "user")
    assert msg.id == 1


def test_create_sets_defaults(store):
    before = datetime.datetime.now(datetime.UTC)
    a = _create(store)
    assert a.ai_response is None
    assert a.additional_symptoms == []
    assert a.medical_history is None
    assert a.created_at >= before


def test_get_missing_returns_none(store):
    assert store.get_assessment(42) is None


def test_update_result_leaves_inputs_untouched(store):
    a = _create(store)
    updated = store.update_assessment_result(a.id, {"possibleConditions": []})
    assert updated.ai_response == {"possibleConditions": []}
    assert updated.model_dump(exclude={"ai_response"}) == a.model_dump(
        exclude={"ai_response"}
    )


def test_update_missing_returns_none(store):
    assert store.update_assessment_result(7, {"possibleConditions": []}) is None
    assert list(store.list_assessments()) == []


def test_update_overwrites_previous_result(store):
    a = _create(store)
    store.update_assessment_result(a.id, {"possibleConditions": [], "v": 1})
    store.update_assessment_result(a.id, {"possibleConditions": [], "v": 2})
    assert store.get_assessment(a.id).ai_response["v"] == 2


def test_reads_return_copies(store):
    a = _create(store)
    a.additional_symptoms.append("Fever")
    a.primary_symptoms = "changed"
    fetched = store.get_assessment(a.id)
    fetched.additional_symptoms.append("Cough")
    again = store.get_assessment(a.id)
    assert again.primary_symptoms == "persistent dry cough at night"
    assert again.additional_symptoms == []


def test_stored_result_is_not_shared_with_caller(store):
    a = _create(store)
    result = {"possibleConditions": [{"condition": "Flu"}]}
    store.update_assessment_result(a.id, result)
    result["possibleConditions"].clear()
    listed = next(store.list_assessments())
    listed.ai_response["possibleConditions"].append({"condition": "Cold"})
    assert store.get_assessment(a.id).ai_response == {
        "possibleConditions": [{"condition": "Flu"}]
    }


def test_list_assessments_newest_first(store):
    for _ in range(5):
        _create(store)
    listed = list(store.list_assessments())
    assert [a.id for a in listed] == [5, 4, 3, 2, 1]
    assert all(
        x.created_at >= y.created_at for x, y in zip(listed, listed[1:])
    )


def test_list_is_recomputed_on_each_call(store):
    _create(store)
    first = store.list_assessments()
    _create(store)
    assert [a.id for a in first] == [2, 1]
    assert [a.id for a in store.list_assessments()] == [2, 1]


def test_list_messages_oldest_first(store):
    store.create_message("first", "user")
    store.create_message("second", "assistant")
    store.create_message("third", "user")
    listed = list(store.list_messages())
    assert [m.content for m in listed] == ["first", "second", "third"]
    assert [m.role for m in listed] == ["user", "assistant", "user"]


def test_concurrent_creates_get_unique_ids():
    store = MemoryStore()
    n_threads, per_thread = 8, 25
    barrier = threading.Barrier(n_threads)

    def worker():
        barrier.wait()
        for _ in range(per_thread):
            _create(store)

    threads = [threading.Thread(target=worker) for _ in range(n_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = sorted(a.id for a in store.list_assessments())
    assert ids == list(range(1, n_threads * per_thread + 1))
