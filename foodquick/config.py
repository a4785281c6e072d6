# foodquick/config.py
"""Configuration settings for Food Quick"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# File paths
DATA_DIR = os.getenv('FOODQUICK_DATA_DIR', 'txt_files')
DRIVERS_FILE = os.getenv('FOODQUICK_DRIVERS_FILE', os.path.join(DATA_DIR, 'drivers-info.txt'))
INVOICE_FILE = os.getenv('FOODQUICK_INVOICE_FILE', os.path.join(DATA_DIR, 'invoice.txt'))
FILE_ENCODING = 'utf-8'

# Invoice settings
CURRENCY_SYMBOL = os.getenv('FOODQUICK_CURRENCY', 'R')

# Roster file format: name,city,load
ROSTER_DELIMITER = ','
ROSTER_FIELD_COUNT = 3

# Answers that end the meal capture loop
STOP_ANSWERS = {'no', 'n'}

# Messages
TOO_FAR_MESSAGE = (
    "Sorry! Our drivers are too far away from you to be able to deliver "
    "to your location."
)
