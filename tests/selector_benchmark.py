import os
import sys
import csv
import random
import time
import statistics

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from topn.selector import TopNSelector

# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int):
    """Generate a list of random non-negative integers of given size."""
    return [random.randint(0, 1000000) for _ in range(size)]

def measure_operation_time(operation, input_size: int, limit: int, iterations: int = 5):
    """Run the operation multiple times and return average + std deviation (ms)."""
    times = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        start = time.perf_counter()
        operation(data, limit)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev

def measure_space_efficiency(operation, input_size: int, limit: int, iterations: int = 3):
    """Return average memory held by the selector's queue after streaming (bytes)."""
    sizes = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        selector = operation(data, limit)
        queue = selector.queue
        total_size = sys.getsizeof(queue) + sys.getsizeof(queue._data) + sys.getsizeof(queue._members)
        for item in queue:
            total_size += sys.getsizeof(item)
        sizes.append(total_size)
    return statistics.mean(sizes)

# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_offer(data, limit):
    return TopNSelector(limit).offer_all(data)

def bench_offer_and_drain(data, limit):
    selector = TopNSelector(limit).offer_all(data)
    selector.largest()
    return selector

def bench_sorted_baseline(data, limit):
    sorted(set(data), reverse=True)[:limit]
    return TopNSelector(limit)

# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100, limit: int = 10):
    """Run exponential performance tests for streaming top-N selection."""
    operations = {
        "offer": bench_offer,
        "offer+drain": bench_offer_and_drain,
        "sorted": bench_sorted_baseline,
    }

    input_sizes = [base_input * (2 ** i) for i in range(12)]

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow([
            "Input Size",
            "Limit",
            "Operation",
            "Average Time (ms)",
            "Standard Deviation (ms)",
            "Average Space (bytes)"
        ])

        for op_name, op_func in operations.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size, limit)
                avg_space = measure_space_efficiency(op_func, size, limit)
                writer.writerow([size, limit, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"])
                print(f"{op_name:<12} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                      f"Std: {std_time:.3f} ms | Avg Space: {avg_space:.0f} bytes")

    print(f"\nBenchmark completed. Results saved to {output_file}")

# ----------------------------
# Main Entry Point
# ----------------------------

if __name__ == "__main__":
    OUTPUT_CSV = "top_n_selector_performance.csv"
    run_benchmarks(OUTPUT_CSV, base_input=100, limit=10)
