# type: ignore

from invoke import task, Collection

from .check import check_import


@task(check_import)
def pytest(ctx):
    """Run the unit tests with py.test."""
    ctx.run('py.test --cov={} --cov-report=term-missing'.format(ctx.package))


@task(check_import)
def cli(ctx):
    """Run the command-line script on a sample header value."""
    ctx.run('{} --usage word --debug "André Pirard"'.format(ctx.package))


@task(pytest, cli)
def all(ctx):
    """Run all test utilities."""
    pass


ns = Collection(pytest, cli)
ns.add_task(all, default=True)
