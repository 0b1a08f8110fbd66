import itertools

from matplotlib.axes import Axes
from matplotlib.figure import Figure

from benchmark import SizeStats
from geometry import Point


def plot_points(points: list[Point], ax: Axes, **kwargs):
    x = [p.x for p in points]
    y = [p.y for p in points]
    ax.scatter(x, y, **kwargs)


def plot_hull(hull: list[Point], ax: Axes, color: str = 'r'):
    """
    Draw a closed hull boundary. Hull points are expected in boundary order.
    """
    if not hull:
        return
    closed = list(hull) + [hull[0]]
    ax.plot([p.x for p in closed], [p.y for p in closed], c=color)
    plot_points(hull, ax, c=color, s=8)


def plot_layers(layers: list[list[Point]], ax: Axes):
    clrs = ['r', 'g', 'b', 'm', 'c', 'y', 'k']
    color_cycle = itertools.cycle(clrs)

    for layer in layers:
        plot_hull(layer, ax, color=next(color_cycle))


def plot_benchmark(stats: list[SizeStats], fig: Figure, iterations_label: str = "Layers"):
    """
    Mean iterations and mean time per trial against the number of points,
    with one standard deviation error bars.
    """
    ns = [s.n_points for s in stats]

    ax_iter, ax_time = fig.subplots(1, 2)
    ax_iter.errorbar(ns, [s.mean_iterations for s in stats], yerr=[s.std_iterations for s in stats], marker='o')
    ax_iter.set_xlabel("Number of points")
    ax_iter.set_ylabel(iterations_label)
    ax_iter.grid(True, alpha=0.3)

    ax_time.errorbar(
        ns,
        [s.mean_time * 1000 for s in stats],
        yerr=[s.std_time * 1000 for s in stats],
        marker='o',
        color='g',
    )
    ax_time.set_xlabel("Number of points")
    ax_time.set_ylabel("Time per trial (ms)")
    ax_time.grid(True, alpha=0.3)


def save_figure(fig: Figure, filename: str):
    fig.tight_layout()
    fig.savefig(filename)
