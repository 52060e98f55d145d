#!/usr/bin/env python3

import argparse
import multiprocessing
import sys
from time import sleep

from joybase import labels
from joybase.configuration import ConfigProvider, ConfigurationError
from joybase.logger import Logger
from joybase.runtime.base_controller import BaseController
from joybase.runtime.messaging import MessageBus
from joybase.runtime.remote_controller import RemoteControllerController
from joybase.runtime.teleop_controller.teleop_controller import TeleopController

log = Logger().setup_logger(enable_stream_handler=True)


def process_remote_controller(config_path) -> None:
    parameters = ConfigProvider.from_file(config_path).remote_parameters()
    RemoteControllerController(parameters).do_process_events_from_queues()


def process_teleop_controller(config_path) -> None:
    parameters = ConfigProvider.from_file(config_path).teleop_parameters()
    TeleopController(parameters).do_process_events_from_queues()


def process_base_controller(config_path) -> None:
    parameters = ConfigProvider.from_file(config_path).base_parameters()
    BaseController(parameters).do_process_events_from_queues()


def main(config_path=None) -> None:
    # fail before any process starts when the configuration is unusable
    provider = ConfigProvider.from_file(config_path)
    provider.teleop_parameters()
    provider.remote_parameters()
    provider.base_parameters()
    logging_parameters = provider.logging_parameters()

    Logger().configure(logging_parameters.folder, logging_parameters.level)

    message_bus = MessageBus()
    log.info(labels.MAIN_MESSAGE_BUS_CREATED)

    targets = [
        process_base_controller,
        process_teleop_controller,
        process_remote_controller,
    ]

    processes = []
    for target in targets:
        process = multiprocessing.Process(target=target, args=(config_path,))
        process.daemon = True
        process.start()
        sleep(0.1)
        if not process.is_alive():
            log.error(labels.MAIN_ERROR_CONTROLLER_FAILED.format(target.__name__))
            sys.exit(1)
        processes.append(process)

    for process in processes:
        process.join()

    log.info(labels.MAIN_MESSAGE_BUS_CLOSING)
    message_bus.close()


def cli() -> None:
    parser = argparse.ArgumentParser(description='JoyBase joystick teleoperation')
    parser.add_argument('--config', help='JSON configuration file (default: ~/joybase.json)')
    args = parser.parse_args()

    log.info(labels.MAIN_STARTING)

    try:
        main(config_path=args.config)

    except ConfigurationError as e:
        log.error(labels.MAIN_CONFIGURATION_ERROR.format(e))
        sys.exit(1)

    except KeyboardInterrupt:
        log.info(labels.MAIN_TERMINATED_CTRL_C)

    else:
        log.info(labels.MAIN_TERMINATED_NORMAL)


if __name__ == '__main__':
    cli()
