import click
import uvicorn
from graphql import print_schema as print_sdl

from .logging import configure_logging, get_logger
from .schema import make_schema


@click.group()
def main():
    pass


@main.command()
@click.option('--host', default='127.0.0.1', show_default=True, help='interface to bind')
@click.option(
    '--port', default=8080, envvar='PORT', type=int, show_default=True, help='port to listen on'
)
@click.option('--debug/--no-debug', default=False, help='console logs and Starlette debug pages')
@click.option('--playground/--no-playground', default=True, help='serve GraphQL Playground')
def serve(host: str, port: int, debug: bool, playground: bool):
    """Run the GraphQL server"""
    from .asgi import create_app

    configure_logging(debug)
    app = create_app(playground=playground, debug=debug)
    get_logger(__name__).info('GraphQL server running', url=f'http://{host}:{port}/graphql/')
    uvicorn.run(app, host=host, port=port, log_level='debug' if debug else 'info')


@main.command('print-schema')
def print_schema():
    """Print the schema SDL"""
    click.echo(print_sdl(make_schema()))


if __name__ == '__main__':
    main()
