import json
from pathlib import Path
from typing import Dict
from tqdm import tqdm

import argparse

from mazegen.config_loader import parse_size
from mazegen.maze_gen.errors import MazeGenError
from mazegen.maze_gen.generator import MazeConfig, MazeGenerator, render_text
from mazegen.maze_gen.locations import Location
from mazegen.eval_core.validator import Validator
from mazegen.eval_core.metrics import Metrics
from mazegen.report.generator import generate_report


def run_single(cfg: MazeConfig, out_dir: Path, report: bool = True) -> Dict:
    """Generate one maze and write its PNG, JSON and (optionally) HTML report."""
    gen = MazeGenerator(cfg)
    maze = gen.generate()
    out_dir.mkdir(parents=True, exist_ok=True)
    stem = f"maze_{cfg.width}x{cfg.height}_{cfg.seed}"
    img_path = out_dir / f"{stem}.png"
    gen.render_image(maze).save(img_path)
    (out_dir / f"{stem}.json").write_text(json.dumps(maze, ensure_ascii=False), encoding='utf-8')

    vres = Validator(maze['grid'], maze['start'], maze['goal'], maze['colors']).validate()
    scores = Metrics().score(maze['grid'], vres)
    fail = '' if vres.get('ok') else f"Failure: {vres.get('error')}"
    item = {'seed': cfg.seed, 'scores': scores, 'img_path': str(img_path), 'maze': maze}
    if report:
        report_path = out_dir / f"report_{stem}.html"
        generate_report(str(report_path), maze, scores, fail, str(img_path))
        item['report'] = str(report_path)
    return item


def build_parser() -> argparse.ArgumentParser:
    locations = [loc.name for loc in Location]
    parser = argparse.ArgumentParser(prog='mazegen', description='Generate perfect-maze images.')
    parser.add_argument('--size', default='9x9', help='WIDTHxHEIGHT in pixels')
    parser.add_argument('--entrance', default='Anywhere', type=Location.parse, help=', '.join(locations))
    parser.add_argument('--exit', default='Anywhere', type=Location.parse, help=', '.join(locations))
    parser.add_argument('--start_color', type=int, default=7)
    parser.add_argument('--end_color', type=int, default=2)
    parser.add_argument('--default_color', type=int, default=1)
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--n', type=int, default=1)
    parser.add_argument('--cell_px', type=int, default=24)
    parser.add_argument('--transparent', action='store_true', help='leave walls transparent in the PNG')
    parser.add_argument('--out_dir', default='examples')
    parser.add_argument('--ascii', action='store_true', help='print each maze to the terminal')
    parser.add_argument('--no_report', action='store_true', help='skip the HTML reports')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        w, h = parse_size(args.size)
    except ValueError:
        parser.error(f"--size must look like 21x21, got {args.size!r}")
    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    results = []
    for i in tqdm(range(args.n), disable=args.n < 2):
        try:
            cfg = MazeConfig(
                width=w, height=h, entrance=args.entrance, exit=args.exit,
                start_color=args.start_color, end_color=args.end_color, default_color=args.default_color,
                seed=None if args.seed is None else args.seed + i,
                cell_px=args.cell_px, transparent_walls=args.transparent,
            )
            item = run_single(cfg, out_dir, report=not args.no_report)
        except MazeGenError as e:
            parser.error(str(e))
        if args.ascii:
            tqdm.write(render_text(item['maze']))
            tqdm.write('')
        item.pop('maze')
        results.append(item)
    summary = {'items': results}
    (out_dir / 'summary.json').write_text(json.dumps(summary, ensure_ascii=False, indent=2), encoding='utf-8')
    print(json.dumps(summary, ensure_ascii=False))
    return 0


if __name__ == '__main__':
    main()
