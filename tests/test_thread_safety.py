"""Thread safety tests for render().

render() shares one compiled document template across calls. These tests
verify that:
1. Concurrent renders with different source-link resolvers never see each
   other's links
2. Concurrent renders of the same model produce byte-identical output
3. The shared master template stays unbound after concurrent use

These tests use real threading to catch actual concurrency bugs.
"""

import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed

from dochtml import MASTER_TEMPLATE, Package, RenderOptions, render
from dochtml.model import Node


def _resolver(prefix: str):
    def link(node: Node) -> str:
        # Yield the GIL mid-walk so calls interleave
        time.sleep(0)
        return f"{prefix}/{node.location.source_file}#L{node.location.lineno}"

    return link


class TestRenderThreadSafety:
    """Verify renders are isolated as documented."""

    def test_resolvers_do_not_leak_between_calls(self, ring_package: Package) -> None:
        prefixes = [f"https://mirror{i}.example" for i in range(8)]
        errors: list[str] = []

        def run(prefix: str) -> tuple[str, bytes]:
            return prefix, render(ring_package, RenderOptions(source_link=_resolver(prefix)))

        with ThreadPoolExecutor(max_workers=8) as pool:
            futures = [pool.submit(run, prefixes[i % len(prefixes)]) for i in range(64)]
            for future in as_completed(futures):
                prefix, html = future.result()
                text = html.decode()
                if text.count(prefix) != 4:
                    errors.append(f"{prefix}: expected 4 own links, found {text.count(prefix)}")
                for other in prefixes:
                    if other != prefix and other in text:
                        errors.append(f"{prefix}: found foreign link {other}")

        assert not errors, f"Isolation errors: {errors}"

    def test_concurrent_output_is_identical(self, ring_package: Package) -> None:
        expected = render(ring_package)
        results: list[bytes] = []
        lock = threading.Lock()

        def worker() -> None:
            html = render(ring_package)
            with lock:
                results.append(html)

        threads = [threading.Thread(target=worker) for _ in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10.0)

        assert len(results) == 16
        assert all(html == expected for html in results)

    def test_master_template_untouched(self, ring_package: Package) -> None:
        template_before = MASTER_TEMPLATE.template

        with ThreadPoolExecutor(max_workers=4) as pool:
            list(pool.map(lambda i: render(ring_package, RenderOptions(source_link=_resolver(f"/{i}"))), range(16)))

        assert MASTER_TEMPLATE.template is template_before
        assert not MASTER_TEMPLATE.is_bound

    def test_size_limits_are_per_call(self, ring_package: Package) -> None:
        """A tight limit in one thread does not affect another."""
        size = len(render(ring_package))
        outcomes: dict[int, str] = {}

        def run(limit: int) -> None:
            try:
                render(ring_package, RenderOptions(limit=limit))
                outcomes[limit] = "ok"
            except Exception as exc:
                outcomes[limit] = type(exc).__name__

        threads = [threading.Thread(target=run, args=(limit,)) for limit in (size - 1, size, size + 1)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10.0)

        assert outcomes == {size - 1: "TooLargeError", size: "ok", size + 1: "ok"}
