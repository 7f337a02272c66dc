from invoke import task


@task
def test(ctx):
    ctx.run("pytest --cov=cfglink --cov-report=term-missing --cov-fail-under=80", echo=True)


@task
def validate(ctx):
    """validate"""
    ctx.run("pyflakes ./src/cfglink ./tests", echo=True)
    ctx.run("black --check --diff  --verbose ./src ./tests tasks.py", echo=True)

    ctx.run("pylint ./src/cfglink", warn=True, echo=True)
    ctx.run("pylint ./tests", warn=True, echo=True)

    ctx.run("mypy ./src/cfglink ./tests", echo=True)


@task
def fmt(ctx):
    ctx.run("black ./src ./tests tasks.py")


@task
def preview(ctx, source=".", target=None):
    """dry run against a checkout, printing the effective config first"""
    args = f"--source {source}"
    if target is not None:
        args += f" --target {target}"
    ctx.run(f"cfglink --show-config {args}", echo=True)
    ctx.run(f"cfglink --dry-run {args}", echo=True)
