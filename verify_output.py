"""
Utility script to compare converted TOON files against their JSON sources.
"""
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional

import config


def compare_sizes(json_text: str, toon_text: str) -> Dict:
    """
    Measure how much shorter a TOON document is than its JSON source.

    Args:
        json_text: Original JSON document
        toon_text: Converted TOON document

    Returns:
        Character counts and savings percentages
    """
    minified = json.dumps(json.loads(json_text), ensure_ascii=False, separators=(",", ":"))
    stats = {
        "json_chars": len(json_text),
        "minified_chars": len(minified),
        "toon_chars": len(toon_text),
    }
    stats["saved_pct"] = _saving(stats["json_chars"], stats["toon_chars"])
    stats["saved_vs_minified_pct"] = _saving(stats["minified_chars"], stats["toon_chars"])
    return stats


def _saving(before: int, after: int) -> float:
    if before == 0:
        return 0.0
    return round(100.0 * (before - after) / before, 1)


def analyze_output(toon_dir: Path, json_dir: Optional[Path] = None) -> List[Dict]:
    """Print a size report for every .toon file that has a matching .json file."""
    if not toon_dir.exists():
        print(f"Error: Output directory not found at {toon_dir}")
        return []

    json_dir = json_dir or toon_dir
    results = []
    for toon_file in sorted(toon_dir.glob(f"*{config.OUTPUT_EXTENSION}")):
        json_file = json_dir / f"{toon_file.stem}.json"
        if not json_file.exists():
            print(f"Warning: No JSON source for {toon_file.name}")
            continue
        try:
            stats = compare_sizes(
                json_file.read_text(encoding="utf-8-sig"),
                toon_file.read_text(encoding="utf-8")
            )
        except json.JSONDecodeError as e:
            print(f"Warning: Failed to parse {json_file.name}: {e}")
            continue
        stats["name"] = toon_file.stem
        results.append(stats)

    if not results:
        print("No converted documents found.")
        return results

    print("\n" + "=" * 60)
    print("OUTPUT ANALYSIS")
    print("=" * 60)
    for stats in results:
        print(f"\n{stats['name']}:")
        print(f"  JSON:          {stats['json_chars']} chars")
        print(f"  JSON minified: {stats['minified_chars']} chars")
        print(f"  TOON:          {stats['toon_chars']} chars")
        print(f"  Saved:         {stats['saved_pct']}% "
              f"({stats['saved_vs_minified_pct']}% vs minified)")

    total_json = sum(s["json_chars"] for s in results)
    total_toon = sum(s["toon_chars"] for s in results)
    print(f"\nTotal documents: {len(results)}")
    print(f"Total saved: {_saving(total_json, total_toon)}%")
    print("=" * 60)
    return results


if __name__ == "__main__":
    toon_dir = config.DATA_DIR
    json_dir = None
    if len(sys.argv) > 1:
        toon_dir = Path(sys.argv[1])
    if len(sys.argv) > 2:
        json_dir = Path(sys.argv[2])

    analyze_output(toon_dir, json_dir)
