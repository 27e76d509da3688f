"""
Benchmark: measure action string parse throughput.
Parses a fixed corpus repeatedly with one shared parser, reports strings/second.
"""
import time

from aw_action.parser import ActionParser

CORPUS = [
    ("Texture", "create texture stone3.jpg mask=stone3m tag=200"),
    ("Multi", "create color red, solid off, visible no, name door; "
              "activate move 0 2 0 time=3 wait=1 loop; bump examine"),
    ("Light", "create light type=spot color=ffcc00 brightness=0.8 radius=20 fx=flicker"),
    ("Teleport", "bump teleport AW 12.5N 33.1W +1.5a 90"),
    ("Sign", 'create sign "Welcome to the gallery" color=white bcolor=navyblue'),
    ("Animate", "create animate tag=3 mask me flag 5 5 100 1 2 3 4 5"),
    ("Garbage", "create oops this is not, a command at all; bump ; ;"),
]


def benchmark_string(parser, name, text, n_iters=2000):
    # Warmup
    parser.parse(text)

    t0 = time.time()
    for _ in range(n_iters):
        parser.parse(text)
    elapsed = time.time() - t0

    rate = n_iters / elapsed
    print(f"  {name:<10} {len(text):>4} chars  {rate:>10,.0f} parses/sec")
    return rate


if __name__ == '__main__':
    t0 = time.time()
    parser = ActionParser()
    print(f"  Grammar build: {time.time() - t0:.3f}s")
    print(f"{'='*60}")

    rates = [benchmark_string(parser, name, text) for name, text in CORPUS]

    print(f"{'='*60}")
    print(f"  Mean: {sum(rates) / len(rates):,.0f} parses/sec")
