from datetime import datetime, timezone
import time

import hydra
from loguru import logger
from omegaconf import DictConfig, OmegaConf

from evoforage import Simulation
from evoforage.config.resolvers import register_resolvers
from evoforage.simulation.config import load_config
from evoforage.utils.logger_setup import setup_logger
from evoforage.utils.trackers import LogWriter, TBConfig, TBWriter


def run_experiment(cfg: DictConfig) -> None:
    start_time = time.time()

    logger.info("=" * 80)
    logger.info("EvoForage Simulation")
    logger.info("=" * 80)
    logger.info(f"Start time: {datetime.now(timezone.utc).isoformat()}")

    writer: LogWriter | None = None
    try:
        logger.info("Step 1/2: Initializing simulation...")
        simulation = Simulation(load_config(cfg.simulation))
        if cfg.tensorboard.enabled:
            writer = TBWriter(TBConfig(logdir=cfg.tensorboard.logdir))
            writer.text(
                "config", OmegaConf.to_yaml(cfg.simulation, resolve=True), step=0
            )
        logger.info("Step 1/2: Complete")

        max_gens: int = cfg.max_generations
        logger.info(f"Step 2/2: Training {max_gens} generation(s)...")
        for _ in range(max_gens):
            stats = simulation.train()
            logger.info("Generation {:>4} | {}", stats.generation, stats.summary())
            if writer is not None:
                writer.write_statistics(stats)
        logger.info(
            "Step 2/2: Complete | ticks={}, food_eaten={}",
            simulation.metrics.total_ticks,
            simulation.metrics.food_eaten,
        )

    except KeyboardInterrupt:
        logger.info("Simulation interrupted by user")
    except Exception as e:  # pylint: disable=broad-except
        logger.error(f"Simulation failed: {e}")
        raise
    finally:
        if writer is not None:
            writer.close()
        duration = time.time() - start_time
        logger.info(f"Total duration: {duration:.2f} seconds")
        logger.info(f"End time: {datetime.now(timezone.utc).isoformat()}")
        logger.info("=" * 80)


@hydra.main(version_base=None, config_path="config", config_name="config")
def main(cfg: DictConfig) -> None:
    """Headless training run with Hydra configuration management."""
    log_file_path = setup_logger(
        log_dir=cfg.logging.log_dir,
        level=cfg.logging.level,
        rotation=cfg.logging.rotation,
        retention=cfg.logging.retention,
    )
    logger.info(
        "Working directory: {}.",
        hydra.core.hydra_config.HydraConfig.get().runtime.output_dir,
    )
    logger.info(f"Log file: {log_file_path}")
    run_experiment(cfg)


if __name__ == "__main__":
    register_resolvers()
    main()
