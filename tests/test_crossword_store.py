import tempfile
import unittest
from pathlib import Path

from crossexpo.engine.crossword_store import CrosswordStore
from crossexpo.engine.generator import CrosswordGenerator, GeneratorConfig


class CrosswordStoreTests(unittest.TestCase):
    def test_save_and_load_document(self) -> None:
        config = GeneratorConfig(max_attempts=5, seed=9)
        result = CrosswordGenerator(config).generate([("rat", "Rodent"), ("car", "Vehicle")])
        with tempfile.TemporaryDirectory() as tmpdir:
            store = CrosswordStore(Path(tmpdir) / "docs")
            doc_id = store.save(result, config)
            self.assertTrue((Path(tmpdir) / "docs" / f"{doc_id}.json").exists())
            doc = store.load(doc_id)

        self.assertEqual(doc["id"], doc_id)
        self.assertEqual(doc["config"]["seed"], 9)
        self.assertEqual(len(doc["result"]["words"]), 2)
        self.assertEqual(doc["result"]["unplaced_words"], [])
        self.assertEqual(doc["stats"]["grid"]["intersections"], 1)
        self.assertEqual(doc["stats"]["words"]["placed"], 2)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
