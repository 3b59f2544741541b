import argparse
import logging

from .document import Document
from .errors import StripesError

logger = logging.getLogger(__name__)


def positive_float(value):
    number = float(value)
    if not number > 0:
        raise argparse.ArgumentTypeError(
            "{!r} is not a positive number".format(value)
        )
    return number


parser = argparse.ArgumentParser(
    prog="stripes-pdf",
    description="Draw a Code128 barcode into a PDF document",
)
parser.add_argument(
    "--bar-width",
    type=positive_float,
    default=0.5,
    help="Width of the narrowest bar (module) in user units."
)
parser.add_argument(
    "--bar-height",
    type=positive_float,
    default=10,
    help="Bar height in user units. Does not include the label."
)
parser.add_argument(
    "-x",
    type=float,
    default=None,
    help="Left edge of the barcode. Defaults to the left margin."
)
parser.add_argument(
    "-y",
    type=float,
    default=None,
    help="Top edge of the barcode. Defaults to the top margin."
)
parser.add_argument(
    "--angle",
    type=float,
    default=0,
    help="Rotate the barcode counterclockwise about its upper-left "\
         "corner, in degrees."
)
parser.add_argument(
    "--unit",
    type=str,
    default="mm",
    choices=["pt", "mm", "cm", "in"],
    help="User unit of all lengths."
)
parser.add_argument(
    "--format",
    type=str,
    default="A4",
    choices=["A3", "A4", "A5", "Letter", "Legal"],
    help="Page size."
)
parser.add_argument(
    "--orientation",
    type=str,
    default="P",
    choices=["P", "L"],
    help="Page orientation, P for portrait, L for landscape."
)
parser.add_argument(
    "--margin",
    type=float,
    default=20,
    help="Page margin in user units."
)
parser.add_argument(
    "--label",
    action="store_true",
    help="Print the content as text under the bars."
)
parser.add_argument(
    "--verbose",
    action="store_true",
    help="Log debug messages."
)
parser.add_argument(
    "content",
    type=str,
    help="Content of barcode, printable ASCII."
)
parser.add_argument(
    "out",
    type=str,
    help="Output path."
)


def main(cmd_args=None):
    args = parser.parse_args(cmd_args)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    pdf = Document(
        margin=args.margin,
        orientation=args.orientation,
        unit=args.unit,
        format=args.format,
    )
    pdf.add_page()
    x = pdf.l_margin if args.x is None else args.x
    y = pdf.t_margin if args.y is None else args.y

    def draw(x, y):
        width = pdf.code128(
            x, y, args.content, args.bar_width, args.bar_height
        )
        if args.label:
            pdf.set_font("Courier", size=10)
            pdf.text(x, y + args.bar_height + pdf.font_size, args.content)
        return width

    try:
        width = pdf.rotated_draw(x, y, draw, args.angle)
    except StripesError as error:
        parser.error(str(error))
    logger.info(
        "Barcode %r is %s %s wide", args.content, width, args.unit
    )
    pdf.output(args.out)


if __name__ == "__main__":
    main()
