"""
Integration tests for DedupCommand — the orchestration layer between CLI and core.
Verifies correct wiring of scanner → matcher with progress and stage reporting.
"""
import pytest
from refdedup import DedupCommand, DedupParams, DuplicatePair
from refdedup.core.models import Stage


class TestDedupCommand:
    """Test command orchestration logic (scanner + matcher integration)."""

    def test_execute_returns_pairs_and_stats(self, dedup_trees):
        ref_dir, target_dir = dedup_trees["ref"], dedup_trees["target"]
        params = DedupParams(reference_dir=str(ref_dir), target_dir=str(target_dir))

        duplicates, stats = DedupCommand().execute(params)

        assert sorted(duplicates) == [
            DuplicatePair(str(target_dir / "file2"), str(ref_dir / "dir2" / "file2")),
            DuplicatePair(str(target_dir / "file4"), str(ref_dir / "file4")),
        ]
        assert stats.stage_stats["scan_reference"]["files"] == 5
        assert stats.stage_stats["scan_target"]["files"] == 6
        assert stats.stage_stats["match"]["pairs"] == 2
        assert stats.total_time >= 0

    def test_execute_does_not_modify_files(self, dedup_trees):
        """Detection alone never removes anything."""
        params = DedupParams(reference_dir=str(dedup_trees["ref"]), target_dir=str(dedup_trees["target"]))

        DedupCommand().execute(params)

        assert (dedup_trees["target"] / "file2").exists()
        assert (dedup_trees["target"] / "file4").exists()

    def test_stage_callback_called_in_order(self, dedup_trees):
        stages = []
        params = DedupParams(reference_dir=str(dedup_trees["ref"]), target_dir=str(dedup_trees["target"]))

        DedupCommand().execute(params, stage_callback=stages.append)

        assert stages == [Stage.SCAN_REFERENCE, Stage.SCAN_TARGET, Stage.MATCH]

    def test_progress_callback_receives_scan_and_compare_events(self, dedup_trees):
        events = []
        params = DedupParams(reference_dir=str(dedup_trees["ref"]), target_dir=str(dedup_trees["target"]))

        DedupCommand().execute(params, progress_callback=lambda *args: events.append(args))

        stage_names = [event[0] for event in events]
        assert stage_names[0] == "scanning"
        assert stage_names[-1] == "comparing"
        assert events[-1] == ("comparing", 6, 6)

    def test_missing_target_raises_oserror(self, dedup_trees):
        params = DedupParams(reference_dir=str(dedup_trees["ref"]), target_dir=str(dedup_trees["ref"] / "nope"))

        with pytest.raises(FileNotFoundError):
            DedupCommand().execute(params)

    def test_scanned_files_available_after_execute(self, dedup_trees):
        command = DedupCommand()
        params = DedupParams(reference_dir=str(dedup_trees["ref"]), target_dir=str(dedup_trees["target"]))

        command.execute(params)

        assert len(command.get_reference_files()) == 5
        assert len(command.get_target_files()) == 6
        command.get_target_files().clear()
        assert len(command.get_target_files()) == 6


class TestDedupParams:

    def test_defaults(self):
        params = DedupParams(reference_dir="ref", target_dir="target")

        assert params.dry_run is False
        assert params.block_size == 4096

    @pytest.mark.parametrize("kwargs, message", [
        ({"reference_dir": "", "target_dir": "t"}, "Reference directory"),
        ({"reference_dir": "r", "target_dir": ""}, "Target directory"),
        ({"reference_dir": "r", "target_dir": "t", "block_size": 0}, "Block size"),
    ])
    def test_validation(self, kwargs, message):
        with pytest.raises(ValueError, match=message):
            DedupParams(**kwargs)
