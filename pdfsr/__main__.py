from pdfsr.cli import main

main()
