# main.py
"""
Main script to render a single cosmic sphere frame.
Builds the sphere and canvas, renders one frame, then saves and/or shows it.
To run: python main.py --output sphere.png
"""
import argparse
import logging
import sys

import numpy as np
import matplotlib.pyplot as plt

import config as cfg
from canvas import ColorCanvas
from sphere import CosmicSphere

logger = logging.getLogger(__name__)

background_color = '#000000'


def build_parser():
    parser = argparse.ArgumentParser(description='Render a cosmic sphere of additive random chords.')
    parser.add_argument('--width', type=int, default=cfg.CANVAS_WIDTH)
    parser.add_argument('--height', type=int, default=cfg.CANVAS_HEIGHT)
    parser.add_argument('--radius', type=float, default=cfg.SPHERE_RADIUS)
    parser.add_argument('--center', type=float, nargs=2, metavar=('X', 'Y'), default=cfg.SPHERE_CENTER)
    parser.add_argument('--color', type=float, nargs=4, metavar=('C0', 'C1', 'C2', 'A'), default=cfg.SPHERE_COLOR)
    parser.add_argument('--chords', type=int, default=cfg.CHORD_COUNT, help='Number of chords to draw')
    parser.add_argument('--light', type=float, nargs=2, metavar=('X', 'Y'), default=cfg.LIGHT_POSITION)
    parser.add_argument('--seed', type=int, default=None, help='Seed for a reproducible frame')
    parser.add_argument('--output', '-o', default=None, help='PNG path to write the frame to')
    parser.add_argument('--show', action='store_true', help='Display the frame in a window')
    parser.add_argument('--verbose', '-v', action='store_true')
    return parser


def render_frame(sphere, light, width, height, rng=None):
    canvas = ColorCanvas(width, height)
    sphere.render(canvas, light, rng)
    return canvas.to_image()


def show_frame(image, title):
    fig = plt.figure(figsize=(6, 6))
    fig.canvas.manager.set_window_title('Cosmic Sphere')
    fig.set_facecolor(background_color)
    ax = fig.add_subplot(111)
    ax.imshow(image)
    ax.set_title(title, color='#f0f0f0')
    ax.axis('off')
    plt.show()


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=cfg.LOG_FORMAT)

    try:
        sphere = CosmicSphere(args.radius, args.center, args.color, args.chords)
        image = render_frame(sphere, args.light, args.width, args.height, np.random.default_rng(args.seed))
    except ValueError as e:
        parser.error(str(e))

    if args.output:
        plt.imsave(args.output, image)
        logger.info("Saved %dx%d frame to: %s", args.width, args.height, args.output)
    if args.show or not args.output:
        show_frame(image, f'Cosmic Sphere (light at {args.light[0]:.0f}, {args.light[1]:.0f})')
    return 0


if __name__ == "__main__":
    sys.exit(main())
