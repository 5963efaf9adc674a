from collector.models import ImageClassification


class ImageListRepository:
    def __init__(self, single_arch_path: str, multi_arch_path: str):
        self.single_arch_path: str = single_arch_path
        self.multi_arch_path: str = multi_arch_path

    def save(self, classification: ImageClassification) -> None:
        # each line is flushed on its own so an interrupted run keeps what it wrote
        with open(self.single_arch_path, "w") as single, open(self.multi_arch_path, "w") as multi:
            for image, secondary_image in classification.single_arch:
                single.write(f"{image} {secondary_image}\n")
                single.flush()
            for image in classification.multi_arch:
                multi.write(f"{image}\n")
                multi.flush()
