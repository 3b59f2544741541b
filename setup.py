import setuptools


with open("README.md", "r") as readme_file:
    readme = readme_file.read()

setuptools.setup(
    name="stripes-pdf",
    version="0.1.0",
    author="Petr Machek",
    description="Rounded shapes, rotation and Code128 barcodes "
                "for fpdf2 documents",
    long_description=readme,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages("src"),
    package_dir={"": "src"},
    install_requires=["fpdf2>=2.7"],
    extras_require={"test": ["pytest", "Pillow"]},
    entry_points={
        "console_scripts": ["stripes-pdf=pdfstripes.cli:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8"
)
