_base_ = [
    './_base_/recognizer.py',
]
source_dir = "./data/source-images"
log_root = "./logs"
log_file = "{log_root}/recognizer.log"
num_threads = 4
verbose = True
