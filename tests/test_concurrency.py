"""
Concurrency tests for phonics.

Tests cover:
- Thread safety documentation verification
- Separate indices per thread work correctly
- Parallel encoding matches serial encoding
- Cancelling a batch from another thread
"""

import concurrent.futures
import threading

import pytest

import phonics as ph
from phonics import batch
from tests.fixtures.real_data import SURNAMES


class TestThreadSafetyDocumentation:
    """Verify thread safety warnings are documented."""

    def test_phonetic_index_docstring_warning(self):
        """PhoneticIndex should have thread safety warning in docstring."""
        docstring = ph.PhoneticIndex.__doc__ or ""
        assert "thread" in docstring.lower(), "Missing thread-safety warning in PhoneticIndex docstring"


class TestSeparateIndicesPerThread:
    """Test that separate index instances work correctly in threads."""

    def test_phonetic_index_separate_instances(self):
        """Separate PhoneticIndex instances should work in parallel."""

        def worker(thread_id):
            index = ph.PhoneticIndex(SURNAMES, algorithm="soundex")
            index.add(f"Smith{thread_id}")
            return [m.text for m in index.search("Smith")]

        with concurrent.futures.ThreadPoolExecutor(max_workers=4) as executor:
            results = list(executor.map(worker, range(4)))

        for thread_id, texts in enumerate(results):
            assert "Smyth" in texts
            # Digits end the Soundex scan, so the suffix does not change the code
            assert f"Smith{thread_id}" in texts
            assert all(f"Smith{other}" not in texts for other in range(4) if other != thread_id)


class TestParallelEncoding:
    """Encoders are pure functions; parallel runs match serial ones."""

    @pytest.mark.parametrize("algorithm", ["soundex", "refined_soundex", "metaphone"])
    def test_parallel_matches_serial(self, algorithm):
        words = SURNAMES * 20
        expected = [ph.encode(w, algorithm) for w in words]

        with concurrent.futures.ThreadPoolExecutor(max_workers=8) as executor:
            actual = list(executor.map(lambda w: ph.encode(w, algorithm), words))

        assert actual == expected

    def test_parallel_batches(self):
        chunks = [SURNAMES[i::4] for i in range(4)]
        with concurrent.futures.ThreadPoolExecutor(max_workers=4) as executor:
            results = list(executor.map(batch.metaphone, chunks))
        for chunk, codes in zip(chunks, results):
            assert codes == [ph.metaphone(w) for w in chunk]


class TestCancellation:
    """Cancel a running batch from another thread."""

    def test_cancel_from_other_thread(self):
        ph.set_check_interval(100)
        try:
            event = threading.Event()
            started = threading.Event()

            def progress(done, total):
                if done > 0:
                    started.set()
                    # Give the controlling thread a chance to cancel
                    event.wait(timeout=5)

            def run():
                return batch.soundex(["Smith"] * 10_000, cancel_event=event, progress=progress)

            with concurrent.futures.ThreadPoolExecutor(max_workers=1) as executor:
                future = executor.submit(run)
                assert started.wait(timeout=5)
                event.set()
                with pytest.raises(ph.EncodingCancelled) as exc_info:
                    future.result(timeout=10)

            assert 0 < exc_info.value.processed < 10_000
        finally:
            ph.set_check_interval(None)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
