"""End-to-end tests for the streaming pipeline and its CLI."""
import io
import json

import pandas as pd
import pytest

from wordsketch.core.errors import ConfigurationError
from wordsketch.experiments.online_evaluator import REPORT_FIELDS
from wordsketch.experiments.stream_pipeline import StreamPipeline, main

CORPUS = [
    "good movie bad day",
    "nice good great film",
]


@pytest.fixture
def pipeline(small_config, lexicon, recording_classifier, tokenizer):
    return StreamPipeline(small_config, lexicon, recording_classifier, tokenizer=tokenizer, out=io.StringIO())


class TestStreamPipeline:
    def test_run_summary(self, pipeline):
        results = pipeline.run(CORPUS)

        assert results["lines"] == 2
        assert results["tokens_seen"] == 8
        assert results["vectors_emitted"] == 6
        assert results["lexicon_events"] == 5
        assert results["trained"] == 3
        assert results["held_out"] == 2
        assert results["confusion"] == {"tp": 1, "fp": 1, "tn": 0, "fn": 0}
        assert results["reports"] == 2
        assert set(results["final"]) == set(REPORT_FIELDS)
        assert results["final"]["accuracy"] == pytest.approx(0.5)

    def test_report_lines_printed(self, pipeline):
        pipeline.run(CORPUS)
        assert len(pipeline.evaluator.out.getvalue().splitlines()) == 2

    def test_vectors_sized_to_context(self, pipeline, recording_classifier):
        pipeline.run(CORPUS)
        for v in recording_classifier.predicted:
            assert v.label_dimension == 10
            assert all(0 <= i < 10 for i in v.feature_indices)

    def test_save_results(self, pipeline, tmp_path):
        pipeline.run(CORPUS)
        paths = pipeline.save_results(tmp_path / "out")

        history = pd.read_csv(paths["history"])
        assert len(history) == 2
        summary = json.loads(paths["summary"].read_text(encoding="utf-8"))
        assert summary["held_out"] == 2
        assert summary["config"]["context_size"] == 10

    def test_missing_corpus(self, pipeline, tmp_path):
        with pytest.raises(FileNotFoundError):
            pipeline.run_file(tmp_path / "missing.txt")

    def test_default_classifier_from_config(self, small_config, lexicon):
        p = StreamPipeline(small_config, lexicon, out=io.StringIO())
        results = p.run(CORPUS)
        assert results["held_out"] == 2


@pytest.fixture
def files(tmp_path):
    lex = tmp_path / "lexicon.tsv"
    lex.write_text("good\t1\nbad\t-1\ngreat\t2\nawful\t-2\n", encoding="utf-8")
    corpus = tmp_path / "corpus.txt"
    corpus.write_text(
        "good film and great cast\nbad plot and awful pacing\ngreat music , bad ending\n",
        encoding="utf-8",
    )
    return lex, corpus


class TestMain:
    def test_success(self, files, tmp_path, capsys):
        lex, corpus = files
        code = main([
            "--lexicon", str(lex), "--corpus", str(corpus),
            "--context-size", "16", "--window-size", "2", "--report-interval", "1",
            "--results-dir", str(tmp_path / "results"),
        ])
        assert code == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == ",".join(REPORT_FIELDS)
        assert len(out) > 1
        assert list((tmp_path / "results").glob("stream_history_*.csv"))

    def test_config_file_and_override(self, files, tmp_path):
        lex, corpus = files
        cfg = tmp_path / "run.json"
        cfg.write_text(json.dumps({"weighting": "ppmi", "context_size": 8}), encoding="utf-8")
        assert main(["--lexicon", str(lex), "--corpus", str(corpus), "--config", str(cfg),
                     "--sketching", "hashing"]) == 0

    def test_bad_selector(self, files, capsys):
        lex, corpus = files
        assert main(["--lexicon", str(lex), "--corpus", str(corpus), "--weighting", "tfidf"]) == 2
        assert "weighting" in capsys.readouterr().err

    def test_bad_integer(self, files):
        lex, corpus = files
        assert main(["--lexicon", str(lex), "--corpus", str(corpus), "--context-size", "lots"]) == 2

    def test_missing_files(self, files, tmp_path):
        lex, corpus = files
        assert main(["--lexicon", str(tmp_path / "nope.tsv"), "--corpus", str(corpus)]) == 2
        assert main(["--lexicon", str(lex), "--corpus", str(tmp_path / "nope.txt")]) == 2

    def test_invalid_utf8_corpus(self, files, tmp_path, capsys):
        """Should report the undecodable file instead of raising."""
        lex, _ = files
        corpus = tmp_path / "latin1.txt"
        corpus.write_bytes(b"good film\ncaf\xe9 was bad\n")
        assert main(["--lexicon", str(lex), "--corpus", str(corpus)]) == 2
        err = capsys.readouterr().err
        assert str(corpus) in err
        assert "UTF-8" in err

    def test_invalid_utf8_lexicon(self, files, tmp_path, capsys):
        _, corpus = files
        lex = tmp_path / "lexicon.tsv"
        lex.write_bytes(b"good\t1\nna\xefve\t-1\n")
        assert main(["--lexicon", str(lex), "--corpus", str(corpus)]) == 2
        assert str(lex) in capsys.readouterr().err

    def test_malformed_lexicon(self, files, tmp_path):
        _, corpus = files
        lex = tmp_path / "broken.tsv"
        lex.write_text("good\t1\nbad\n", encoding="utf-8")
        assert main(["--lexicon", str(lex), "--corpus", str(corpus)]) == 2
        assert main(["--lexicon", str(lex), "--corpus", str(corpus), "--skip-bad-lexicon-lines"]) == 0


def test_configuration_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)
