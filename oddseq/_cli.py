import io
import typing as ty
import warnings
from contextlib import redirect_stdout
from dataclasses import dataclass

import click
from omegaconf import OmegaConf, DictConfig
from omegaconf.errors import OmegaConfBaseException

from oddseq.sequence import take_odd_positions
from oddseq._version import version


T = ty.TypeVar("T")


@dataclass
class DemoConfig:
    start: int = 1
    stop: int = 100
    label: str = "filtered element"


def load_config(config_path: ty.Optional[str] = None) -> DictConfig:
    """Reads the demo settings from a YAML file, filling in defaults for
    any setting it leaves out.
    """
    conf = OmegaConf.structured(DemoConfig)
    if config_path is None:
        return conf
    hide_stdout = io.StringIO()
    with redirect_stdout(hide_stdout):
        user_conf = OmegaConf.load(config_path)
    try:
        return OmegaConf.merge(conf, user_conf)  # type: ignore
    except OmegaConfBaseException as e:
        raise click.BadParameter(str(e), param_hint="'--config'") from e


def on_each(
    iterable: ty.Iterable[T], action: ty.Callable[[T], ty.Any]
) -> ty.Iterator[T]:
    """Lazily calls ``action`` on every element as it passes through."""
    for element in iterable:
        action(element)
        yield element


@click.group("oddseq")
@click.option(
        '--config', 'config_path',
        type=click.Path(exists=True, dir_okay=False),
        default=None,
        help='YAML file setting start, stop, and label for the demo.'
        )
@click.pass_context
def cli(ctx, config_path):
    """Lazily keep the elements at odd positions of a sequence."""
    title = 'Odd Sequence'
    underline = '-' * len(title)
    version_str = f'version: {version}'
    title_fmt = click.style(title, fg='green')
    title_header = f'\n{title_fmt}\n{underline}\n{version_str}\n'
    click.echo(title_header)

    ctx.obj = {}
    ctx.obj['config'] = load_config(config_path)


@cli.command()
@click.option('--start', type=int, default=None, help='First number.')
@click.option('--stop', type=int, default=None, help='Last number.')
@click.option(
        '--label', type=str, default=None,
        help='Text printed before each filtered element.'
        )
@click.pass_context
def demo(ctx, start, stop, label):
    """Prints the odd-position elements of the numbers START..STOP."""
    conf = ctx.obj['config']
    overrides = {'start': start, 'stop': stop, 'label': label}
    for key, value in overrides.items():
        if value is not None:
            conf[key] = value
    if conf.stop < conf.start:
        warnings.warn(
            f"Range {conf.start}..{conf.stop} is empty, nothing to filter.",
            UserWarning,
        )
    numbers = range(conf.start, conf.stop + 1)
    collected = list(on_each(
            take_odd_positions(numbers),
            lambda x: click.echo(f'{conf.label}: {x}'),
            ))
    summary = click.style(f'collected {len(collected)} elements', fg='green')
    click.echo(f'\n{summary}')
