import json

import numpy as np

from slope_route.config import Config, MapConfig, MotionConfig, SearchConfig
from slope_route.main import main
from slope_route.pipeline import RouteRunner


def flat_config(**motion):
    return Config(
        map=MapConfig(width=100, height=60),
        motion=MotionConfig(**motion),
        search=SearchConfig(max_expansions=10_000),
    )


def test_runner_saves_assets(flat_field, tmp_path):
    result = RouteRunner(flat_config(), height_field=flat_field).run(output_dir=str(tmp_path))

    assert result.success
    assert result.metrics.num_steps == 5
    assert result.metrics.total_cost == 0
    assert (tmp_path / 'result_image.png').exists()

    arrays = np.load(tmp_path / 'route.npz')
    assert arrays['positions'].shape == (6, 2)
    assert arrays['positions'][-1].tolist() == [100, 30]

    logs = json.loads((tmp_path / 'logs.json').read_text())
    assert logs['status'] == 'success'
    assert logs['stats']['expansions'] == result.stats['expansions']
    assert logs['config']['map']['width'] == 100
    assert len(logs['route']) == 6


def test_runner_reports_failure_without_image(flat_field, tmp_path):
    result = RouteRunner(flat_config(max_turn_deg=0), height_field=flat_field).run(
        output_dir=str(tmp_path)
    )

    assert result.status == 'failed'
    assert not result.success
    assert result.route is None
    assert 'exhausted' in result.error
    assert not (tmp_path / 'result_image.png').exists()

    logs = json.loads((tmp_path / 'logs.json').read_text())
    assert logs['status'] == 'failed'
    assert logs['route'] is None


def test_runner_without_output_dir(flat_field):
    result = RouteRunner(flat_config(), height_field=flat_field).run()
    assert result.success
    assert result.assets == {}


def test_render_terrain(flat_field, tmp_path):
    path = RouteRunner(flat_config(), height_field=flat_field).render_terrain(str(tmp_path))
    assert path.exists()


def test_renderer_background_alpha(flat_field):
    renderer = RouteRunner(flat_config(), height_field=flat_field).renderer
    background = renderer.background()
    assert background.shape == (60, 100, 4)
    # flat ground sits at the 100/255 opacity midpoint
    assert np.allclose(background[..., 3], 100 / 255.0)
    assert np.all(background[..., :3] == 1.0)


def test_cli_plan(tmp_path, capsys):
    code = main(['plan', '--width', '60', '--height', '40', '--output', str(tmp_path)])
    assert code == 0
    assert (tmp_path / 'result_image.png').exists()
    assert 'ROUTE RESULT' in capsys.readouterr().out


def test_cli_plan_failure(tmp_path):
    code = main(['plan', '--width', '60', '--height', '40', '--max-turn', '0',
                 '--output', str(tmp_path), '--no_save'])
    assert code == 1


def test_cli_no_save_alias(tmp_path):
    out = tmp_path / 'out'
    code = main(['plan', '--width', '60', '--height', '40', '--output', str(out), '--no-save'])
    assert code == 0
    assert not (out / 'result_image.png').exists()
