"""Tests for batch prediction, ranking and output writing."""

from outreach.domain.entities import Prediction, Profile, ScoredProfile
from outreach.pipelines.prediction import (
    BatchPredictionPipeline,
    predict_batch,
    scored_to_frame,
    select_top_matches,
    write_person_ids,
)


def scored(person_id: str, probability: float, is_positive: bool | None = None) -> ScoredProfile:
    if is_positive is None:
        is_positive = probability > 0.5
    return ScoredProfile(
        profile=Profile(person_id, "role", "country", "industry"),
        prediction=Prediction(is_positive=is_positive, probability=probability, score=0.0),
    )


class TestSelectTopMatches:
    def test_drops_negatives(self):
        items = [scored("a", 0.9), scored("b", 0.2), scored("c", 0.7)]
        assert [s.person_id for s in select_top_matches(items)] == ["a", "c"]

    def test_sorted_by_descending_probability(self):
        items = [scored("a", 0.6), scored("b", 0.95), scored("c", 0.8)]
        result = select_top_matches(items)
        probabilities = [s.prediction.probability for s in result]
        assert probabilities == sorted(probabilities, reverse=True)
        assert [s.person_id for s in result] == ["b", "c", "a"]

    def test_ties_keep_input_order(self):
        items = [scored("a", 0.7), scored("b", 0.9), scored("c", 0.7), scored("d", 0.7)]
        assert [s.person_id for s in select_top_matches(items)] == ["b", "a", "c", "d"]

    def test_truncates_to_top_n(self):
        items = [scored(f"p{i}", 0.51 + i / 1000) for i in range(150)]
        result = select_top_matches(items)
        assert len(result) == 100
        assert result[0].person_id == "p149"
        assert result[-1].person_id == "p50"

    def test_custom_top_n(self):
        items = [scored("a", 0.9), scored("b", 0.8), scored("c", 0.7)]
        assert [s.person_id for s in select_top_matches(items, top_n=2)] == ["a", "b"]

    def test_uses_label_not_probability(self):
        items = [scored("a", 0.9, is_positive=False), scored("b", 0.3, is_positive=True)]
        assert [s.person_id for s in select_top_matches(items)] == ["b"]

    def test_empty(self):
        assert select_top_matches([]) == []

    def test_no_positives(self):
        assert select_top_matches([scored("a", 0.1), scored("b", 0.4)]) == []


class TestScoredToFrame:
    def test_rows_in_input_order(self):
        df = scored_to_frame([scored("a", 0.9), scored("b", 0.2)])
        assert df["person_id"].to_list() == ["a", "b"]
        assert df["is_positive"].to_list() == [True, False]


class TestWritePersonIds:
    def test_one_id_per_line(self, tmp_path):
        path = write_person_ids(tmp_path / "out" / "people.out", [scored("a", 0.9), scored("b", 0.8)])
        assert path.read_text(encoding="utf-8").splitlines() == ["a", "b"]

    def test_empty_file(self, tmp_path):
        path = write_person_ids(tmp_path / "people.out", [])
        assert path.read_text(encoding="utf-8") == ""


class TestBatchPrediction:
    def test_predict_batch_pairs_profiles(self, trained_model, inference_profiles):
        result = predict_batch(trained_model, inference_profiles)
        assert [s.profile for s in result] == inference_profiles

    def test_single_positive_written(self, tmp_path, trained_model, inference_profiles):
        output = tmp_path / "people.out"
        matches = BatchPredictionPipeline(trained_model).run(inference_profiles, output)

        assert [m.person_id for m in matches] == ["q1"]
        assert output.read_text(encoding="utf-8").splitlines() == ["q1"]

    def test_output_bounded_and_positive(self, tmp_path, trained_model):
        profiles = [Profile(f"s{i}", "Software Engineer", "USA", "Software") for i in range(120)]
        profiles += [Profile(f"r{i}", "Store Clerk", "Mexico", "Retail") for i in range(10)]
        output = tmp_path / "people.out"

        matches = BatchPredictionPipeline(trained_model, top_n=100).run(profiles, output)

        lines = output.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 100
        assert all(line.startswith("s") for line in lines)
        # identical profiles tie, so input order is kept
        assert lines == [f"s{i}" for i in range(100)]
        assert all(m.prediction.is_positive for m in matches)
