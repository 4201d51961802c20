import sys
import argparse
from pathlib import Path

import yaml

from acoustic.logger import SimulationLogger
from acoustic.simulations import SimulationConfig, SimulationRunner


def parse_args(argv=None):
    """コマンドライン引数をパース"""
    parser = argparse.ArgumentParser(description="4次精度差分による音響波動シミュレーション")
    parser.add_argument("--config", type=str, required=True, help="設定ファイルのパス")
    parser.add_argument("--output", type=str, help="出力ディレクトリ（設定ファイルより優先）")
    parser.add_argument("--debug", action="store_true", help="デバッグモードを有効化")
    return parser.parse_args(argv)


def setup_logging(config: SimulationConfig, debug: bool) -> SimulationLogger:
    """ロギングを設定"""
    if debug:
        config.logging.level = "debug"
    log_config = config.logging.to_log_config(default_dir=config.output.directory)
    return SimulationLogger("AcousticFD", log_config)


def main(argv=None) -> int:
    """メイン関数"""
    args = parse_args(argv)

    try:
        config = SimulationConfig.from_file(args.config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"設定ファイルの読み込みに失敗しました: {e}", file=sys.stderr)
        return 1

    if args.output:
        config.output.directory = str(Path(args.output))

    logger = setup_logging(config, args.debug)
    try:
        runner = SimulationRunner(config, logger)
        logger.log_simulation_state(runner.propagator.get_diagnostics(), level="debug")
        summary = runner.run()
        logger.log_simulation_state(summary)
        return 0
    except Exception as e:
        logger.log_error_with_context(
            "シミュレーション中にエラーが発生", e, {"config": args.config}
        )
        return 1
    finally:
        logger.close()


if __name__ == "__main__":
    sys.exit(main())
