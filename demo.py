"""
Binary Heap Demo -- Ordering scenarios, sort correctness, operation cost
against heapq, and comparator calls per operation.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
import time
import heapq
import operator
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from binary_heap import Heap, MinHeap, MaxHeap

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

SIZES = [100, 300, 1000, 3000, 10000]
REPEATS = 5

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "dark": "#2c3e50",
}


class CountingComparator:
    """Wraps a predicate and counts how often the heap calls it."""

    def __init__(self, predicate):
        self.predicate = predicate
        self.calls = 0

    def __call__(self, a, b):
        self.calls += 1
        return self.predicate(a, b)


# ---------------------------------------------------------------------------
# Example 1: Min/Max Scenarios
# ---------------------------------------------------------------------------
def example_1_scenarios():
    """Walk through the reference add/pop sequences for both presets."""
    print("=" * 60)
    print("Example 1: Min/Max Scenarios")
    print("=" * 60)

    for name, heap in (("MinHeap", MinHeap()), ("MaxHeap", MaxHeap())):
        for v in [4, 2, 9, 11]:
            heap.add(v)
        popped = [heap.pop() for _ in range(3)]
        heap.add(1)
        popped.extend(heap)
        print(f"  {name:8s} add 4, 2, 9, 11 | pop x3 | add 1 | drain -> {popped}")

    empty = MaxHeap()
    print(f"  Empty MaxHeap pop -> {empty.pop()}")
    print()


# ---------------------------------------------------------------------------
# Example 2: Sort Correctness
# ---------------------------------------------------------------------------
def example_2_sort_correctness():
    """Drain heaps built from random multisets and compare against sorted()."""
    print("=" * 60)
    print("Example 2: Sort Correctness")
    print("=" * 60)

    trials = 200
    failures = 0
    for _ in range(trials):
        values = np.random.randint(0, 50, size=np.random.randint(0, 80)).tolist()
        asc = Heap.from_iterable(values, operator.lt).into_sorted()
        heap = MaxHeap()
        for v in values:
            heap.add(v)
        desc = heap.into_sorted()
        if asc != sorted(values) or desc != sorted(values, reverse=True):
            failures += 1

    print(f"  Trials: {trials}, failures: {failures}")
    print()
    return failures


# ---------------------------------------------------------------------------
# Example 3: Timing Benchmark
# ---------------------------------------------------------------------------
def _time_heap(values):
    start = time.perf_counter()
    heap = MinHeap()
    for v in values:
        heap.add(v)
    while not heap.is_empty():
        heap.pop()
    return time.perf_counter() - start


def _time_heapq(values):
    start = time.perf_counter()
    data = []
    for v in values:
        heapq.heappush(data, v)
    while data:
        heapq.heappop(data)
    return time.perf_counter() - start


def example_3_timing_benchmark():
    """Compare add+pop wall time against the C-accelerated heapq module."""
    print("=" * 60)
    print("Example 3: Timing Benchmark (n adds then n pops)")
    print("=" * 60)

    heap_ms = []
    heapq_ms = []
    for n in SIZES:
        values = np.random.rand(n).tolist()
        ours = np.median([_time_heap(values) for _ in range(REPEATS)]) * 1e3
        ref = np.median([_time_heapq(values) for _ in range(REPEATS)]) * 1e3
        heap_ms.append(ours)
        heapq_ms.append(ref)
        print(f"  n={n:6d}  Heap: {ours:8.2f} ms  heapq: {ref:8.2f} ms  ratio: {ours / ref:5.1f}x")

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    ax = axes[0]
    ax.loglog(SIZES, heap_ms, "o-", color=COLORS["blue"], label="Heap (comparator)")
    ax.loglog(SIZES, heapq_ms, "s-", color=COLORS["orange"], label="heapq")
    ax.set_xlabel("n")
    ax.set_ylabel("median time (ms)")
    ax.set_title("n adds + n pops")
    ax.legend()
    ax.grid(True, which="both", alpha=0.3)

    ax = axes[1]
    per_op = np.array(heap_ms) * 1e3 / (2 * np.array(SIZES))
    ax.semilogx(SIZES, per_op, "o-", color=COLORS["green"])
    ax.set_xlabel("n")
    ax.set_ylabel("time per operation (us)")
    ax.set_title("Per-operation cost grows as O(log n)")
    ax.grid(True, which="both", alpha=0.3)

    fig.suptitle("Timing Benchmark", fontsize=14, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_timing_benchmark.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print()


# ---------------------------------------------------------------------------
# Example 4: Comparator Calls vs log2(n)
# ---------------------------------------------------------------------------
def example_4_comparator_calls():
    """Count comparator calls per add and per pop against the log2(n) bound."""
    print("=" * 60)
    print("Example 4: Comparator Calls per Operation")
    print("=" * 60)

    add_calls = []
    pop_calls = []
    for n in SIZES:
        counter = CountingComparator(operator.lt)
        heap = Heap(counter)
        for v in np.random.permutation(n).tolist():
            heap.add(v)
        add_calls.append(counter.calls / n)

        counter.calls = 0
        for _ in heap:
            pass
        pop_calls.append(counter.calls / n)
        print(f"  n={n:6d}  calls/add: {add_calls[-1]:5.2f}  "
              f"calls/pop: {pop_calls[-1]:5.2f}  log2(n): {np.log2(n):5.2f}")

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.semilogx(SIZES, add_calls, "o-", color=COLORS["blue"], label="add (sift up)")
    ax.semilogx(SIZES, pop_calls, "s-", color=COLORS["red"], label="pop (sift down)")
    ax.semilogx(SIZES, 2 * np.log2(SIZES), "--", color=COLORS["dark"], label=r"$2\log_2 n$")
    ax.set_xlabel("n")
    ax.set_ylabel("comparator calls per operation")
    ax.set_title("Comparator Calls vs Heap Size")
    ax.legend()
    ax.grid(True, which="both", alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_comparator_calls.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print()


def generate_pdf_report():
    """Generate a PDF report with a title page and every visualization."""
    print("=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Binary Heap", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "Comparator-Ordered Priority Queue",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "A complete binary tree stored in a list. The parent of position i\n"
            "is (i - 1) // 2 and its children are 2i + 1 and 2i + 2.\n"
            "add() sifts the new element up; pop() moves the last element to the\n"
            "root and sifts it down. Both touch at most one root-to-leaf path.\n\n"
            "This demo covers:\n"
            "  1. Wall-clock cost against heapq\n"
            "  2. Comparator calls per operation against log2(n)\n\n"
            f"Sizes: {SIZES}\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.30, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = viz_file.stem.split("_", 1)[1].replace("_", " ").title()
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


def main():
    print("Binary Heap Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print(f"Sizes: {SIZES}")
    print()

    example_1_scenarios()
    failures = example_2_sort_correctness()
    example_3_timing_benchmark()
    example_4_comparator_calls()
    generate_pdf_report()

    print("\n" + "=" * 60)
    if failures:
        print(f"Sort correctness failed in {failures} trials.")
        sys.exit(1)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
