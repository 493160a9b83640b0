"""Free-threading safe: render 200 packages in parallel, each with its own source links."""

from concurrent.futures import ThreadPoolExecutor

from dochtml import Decl, Func, Package, RenderOptions, SourceLocation, render

packages = [
    Package(
        name=f"pkg{i}",
        import_path=f"example.com/pkg{i}",
        funcs=(Func("Run", decl=Decl("func Run() error", location=SourceLocation(10, source_file="run.go"))),),
    )
    for i in range(200)
]


def render_one(pkg: Package) -> bytes:
    def link(node):
        return f"https://{pkg.import_path}/blob/main/{node.location.source_file}#L{node.location.lineno}"

    return render(pkg, RenderOptions(source_link=link))


with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(render_one, packages))

print(f"Rendered {len(results)} documents in parallel")
print("Total bytes:", sum(len(html) for html in results))
